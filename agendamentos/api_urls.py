# agendamentos/api_urls.py
from django.urls import path

from .api_views import AgendamentoCreateView, DiasView, DisponibilidadeView, PixView

app_name = "api_agendamentos"

urlpatterns = [
    path("", AgendamentoCreateView.as_view(), name="criar"),
    path("disponibilidade/", DisponibilidadeView.as_view(), name="disponibilidade"),
    path("dias/", DiasView.as_view(), name="dias"),
    path("pix/", PixView.as_view(), name="pix"),
]
