# configuracoes/models.py
from django.conf import settings
from django.db import models

PIX_CIDADE_PADRAO = "João Pessoa"
PIX_RECEBEDOR_PADRAO = "Salao Alessandra Oliveira"


class ConfiguracaoSite(models.Model):
    """
    Linha única com os dados de contato e PIX do salão.
    Carregada uma vez por requisição (`carregar`) e passada adiante explicitamente.
    """
    telefone = models.CharField("WhatsApp", max_length=32, blank=True)
    instagram = models.CharField(max_length=120, blank=True)
    endereco = models.CharField(max_length=255, blank=True)
    banner_url = models.URLField(max_length=500, null=True, blank=True)

    pix_chave = models.CharField("Chave PIX", max_length=120, null=True, blank=True)
    pix_recebedor = models.CharField("Nome do recebedor", max_length=120, null=True, blank=True)
    pix_cidade = models.CharField("Cidade do PIX", max_length=60, default=PIX_CIDADE_PADRAO)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Configuração do site"
        verbose_name_plural = "Configurações do site"

    def __str__(self):
        return "Configurações do site"

    @classmethod
    def carregar(cls) -> "ConfiguracaoSite":
        obj, _ = cls.objects.get_or_create(pk=1)
        return obj

    @property
    def pix_disponivel(self) -> bool:
        return bool((self.pix_chave or "").strip())

    @property
    def recebedor_pix(self) -> str:
        return (self.pix_recebedor or "").strip() or PIX_RECEBEDOR_PADRAO

    @property
    def cidade_pix(self) -> str:
        return (self.pix_cidade or "").strip() or getattr(settings, "SALAO_PIX_CIDADE_PADRAO", PIX_CIDADE_PADRAO)
