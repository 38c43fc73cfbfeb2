# configuracoes/api_urls.py
from django.urls import path
from .api_views import ConfiguracaoPublicaView

app_name = "api_configuracoes"

urlpatterns = [
    path("", ConfiguracaoPublicaView.as_view(), name="publica"),
]
