from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Servico",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nome", models.CharField(max_length=120, unique=True)),
                ("preco", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=8, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("duracao_min", models.PositiveIntegerField(default=30, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(480)])),
                ("descricao", models.TextField(blank=True, null=True)),
                ("imagem_url", models.URLField(blank=True, max_length=500, null=True)),
                ("ativo", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["nome"],
                "indexes": [models.Index(fields=["nome"], name="servico_nome_idx")],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("duracao_min__gt", 0)), name="servico_duracao_gt_zero"),
                    models.CheckConstraint(condition=models.Q(("preco__gte", 0)), name="servico_preco_nao_negativo"),
                ],
            },
        ),
    ]
