# produtos/models.py
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models


class Produto(models.Model):
    """Produto exibido na vitrine do site (não entra na agenda)."""
    nome = models.CharField(max_length=120)
    preco = models.DecimalField(
        max_digits=8, decimal_places=2, default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    descricao = models.TextField(null=True, blank=True)
    imagem_url = models.URLField(max_length=500, null=True, blank=True)
    ativo = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(name="produto_preco_nao_negativo", condition=models.Q(preco__gte=0)),
        ]

    def __str__(self):
        return self.nome
