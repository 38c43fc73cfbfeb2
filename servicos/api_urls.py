# servicos/api_urls.py
from django.urls import path
from .api_views import ServicoListView

app_name = "api_servicos"

urlpatterns = [
    path("", ServicoListView.as_view(), name="lista"),
]
