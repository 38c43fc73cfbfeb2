# configuracoes/serializers.py
from rest_framework import serializers

from .models import ConfiguracaoSite


class ConfiguracaoPublicaSerializer(serializers.ModelSerializer):
    pix_disponivel = serializers.BooleanField(read_only=True)

    class Meta:
        model = ConfiguracaoSite
        fields = ["telefone", "instagram", "endereco", "banner_url", "pix_disponivel"]
