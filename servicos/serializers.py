# servicos/serializers.py
from rest_framework import serializers

from .models import Servico


class ServicoPublicoSerializer(serializers.ModelSerializer):
    duracao_label = serializers.CharField(read_only=True)

    class Meta:
        model = Servico
        fields = ["id", "nome", "duracao_min", "duracao_label", "preco", "descricao", "imagem_url"]
