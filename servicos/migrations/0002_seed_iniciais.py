# servicos/migrations/0002_seed_iniciais.py
from django.db import migrations
from decimal import Decimal

BASE = [
    ("Corte feminino",            60,  Decimal("70.00")),
    ("Escova modelada",           45,  Decimal("50.00")),
    ("Hidratação capilar",        60,  Decimal("80.00")),
    ("Coloração",                 120, Decimal("180.00")),
    ("Progressiva",               180, Decimal("250.00")),
    ("Manicure",                  30,  Decimal("30.00")),
    ("Pedicure",                  30,  Decimal("35.00")),
    ("Design de sobrancelhas",    30,  Decimal("35.00")),
]


def seed(apps, schema_editor):
    Servico = apps.get_model("servicos", "Servico")
    for nome, dur, preco in BASE:
        Servico.objects.update_or_create(
            nome=nome,
            defaults={"duracao_min": dur, "preco": preco, "ativo": True},
        )


def unseed(apps, schema_editor):
    Servico = apps.get_model("servicos", "Servico")
    Servico.objects.filter(nome__in=[nome for nome, _, _ in BASE]).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("servicos", "0001_initial"),
    ]
    operations = [
        migrations.RunPython(seed, unseed),
    ]
