import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("servicos", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Agendamento",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("servico_nome", models.CharField(blank=True, max_length=120)),
                ("cliente_nome", models.CharField(max_length=120)),
                ("cliente_telefone", models.CharField(max_length=32)),
                ("data", models.DateField()),
                ("hora", models.TimeField()),
                ("status", models.CharField(choices=[("pending", "Pendente"), ("confirmed", "Confirmado"), ("cancelled", "Cancelado"), ("completed", "Concluído")], default="pending", max_length=12)),
                ("status_pagamento", models.CharField(choices=[("pending", "Pendente"), ("paid", "Pago"), ("refunded", "Reembolsado")], default="pending", max_length=12)),
                ("observacoes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("servico", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="agendamentos", to="servicos.servico")),
            ],
            options={
                "ordering": ["-data", "-hora"],
                "indexes": [
                    models.Index(fields=["data", "status"], name="agendamento_data_status_idx"),
                    models.Index(fields=["status"], name="agendamento_status_idx"),
                ],
            },
        ),
    ]
