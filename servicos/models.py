# servicos/models.py
from decimal import Decimal
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Servico(models.Model):
    nome = models.CharField(max_length=120, unique=True)
    preco = models.DecimalField(
        max_digits=8, decimal_places=2, default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    duracao_min = models.PositiveIntegerField(
        default=30, validators=[MinValueValidator(1), MaxValueValidator(480)],
    )
    descricao = models.TextField(null=True, blank=True)
    imagem_url = models.URLField(max_length=500, null=True, blank=True)
    ativo = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["nome"]
        indexes = [models.Index(fields=["nome"], name="servico_nome_idx")]
        constraints = [
            models.CheckConstraint(name="servico_duracao_gt_zero", condition=models.Q(duracao_min__gt=0)),
            models.CheckConstraint(name="servico_preco_nao_negativo", condition=models.Q(preco__gte=0)),
        ]

    def __str__(self):
        return self.nome

    @property
    def duracao_label(self) -> str:
        """Ex.: 45min, 1h, 1h30min."""
        horas, minutos = divmod(int(self.duracao_min or 0), 60)
        if horas == 0:
            return f"{minutos}min"
        if minutos == 0:
            return f"{horas}h"
        return f"{horas}h{minutos}min"
