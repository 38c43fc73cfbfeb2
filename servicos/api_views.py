# servicos/api_views.py
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Servico
from .serializers import ServicoPublicoSerializer


class ServicoListView(APIView):
    """Catálogo público: apenas serviços ativos, por nome."""

    def get(self, request, *args, **kwargs):
        qs = Servico.objects.filter(ativo=True).order_by("nome")
        return Response(ServicoPublicoSerializer(qs, many=True).data)
