# produtos/serializers.py
from rest_framework import serializers

from .models import Produto


class ProdutoPublicoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Produto
        fields = ["id", "nome", "preco", "descricao", "imagem_url"]
