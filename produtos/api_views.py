# produtos/api_views.py
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Produto
from .serializers import ProdutoPublicoSerializer


class ProdutoListView(APIView):
    def get(self, request, *args, **kwargs):
        qs = Produto.objects.filter(ativo=True).order_by("created_at")
        return Response(ProdutoPublicoSerializer(qs, many=True).data)
