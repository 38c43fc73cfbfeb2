# produtos/api_urls.py
from django.urls import path
from .api_views import ProdutoListView

app_name = "api_produtos"

urlpatterns = [
    path("", ProdutoListView.as_view(), name="lista"),
]
