# configuracoes/api_views.py
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import ConfiguracaoSite
from .serializers import ConfiguracaoPublicaSerializer


class ConfiguracaoPublicaView(APIView):
    """Dados de contato exibidos no site (rodapé, banner, botão do WhatsApp)."""

    def get(self, request, *args, **kwargs):
        return Response(ConfiguracaoPublicaSerializer(ConfiguracaoSite.carregar()).data)
