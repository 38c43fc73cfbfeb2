# core/urls.py
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),

    # -------- API PÚBLICA --------
    path("api/servicos/", include(("servicos.api_urls", "api_servicos"))),
    path("api/produtos/", include(("produtos.api_urls", "api_produtos"))),
    path("api/configuracoes/", include(("configuracoes.api_urls", "api_configuracoes"))),
    path("api/agendamentos/", include(("agendamentos.api_urls", "api_agendamentos"))),
]
