# agendamentos/serializers.py
from __future__ import annotations

from rest_framework import serializers

from core.contacts import normalize_phone
from servicos.models import Servico
from .disponibilidade import CONFIG_PADRAO, is_closed_or_past, parse_time
from .models import Agendamento


class AgendamentoIntakeSerializer(serializers.Serializer):
    servico_id       = serializers.IntegerField()
    cliente_nome     = serializers.CharField(max_length=120)
    cliente_telefone = serializers.CharField(max_length=32)
    data             = serializers.DateField(input_formats=["%Y-%m-%d"])
    hora             = serializers.CharField(max_length=8)          # HH:MM ou HH:MM:SS
    pago_via_pix     = serializers.BooleanField(required=False, default=False)
    observacoes      = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    _servico_obj: Servico | None = None

    def validate_cliente_nome(self, value: str) -> str:
        nome = (value or "").strip()
        if not nome:
            raise serializers.ValidationError("Informe seu nome.")
        return nome

    def validate_cliente_telefone(self, value: str) -> str:
        tel = normalize_phone(value)
        if not tel:
            raise serializers.ValidationError("Telefone inválido. Use DDD + número.")
        return tel

    def validate_servico_id(self, value: int) -> int:
        svc = Servico.objects.filter(pk=value, ativo=True).first()
        if not svc:
            raise serializers.ValidationError("Serviço não encontrado ou inativo.")
        self._servico_obj = svc
        return value

    def validate_hora(self, value: str):
        hora = parse_time(value)
        if hora is None:
            raise serializers.ValidationError("Horário inválido (use HH:MM).")
        return hora

    def validate(self, attrs):
        config = self.context.get("config") or CONFIG_PADRAO
        hoje = self.context["hoje"]
        agora = self.context.get("agora")
        dia = attrs["data"]
        hora = attrs["hora"]

        if is_closed_or_past(dia, hoje, config):
            raise serializers.ValidationError({"data": "Data indisponível para agendamento."})

        if hora.second or hora.strftime("%H:%M") not in config.horarios():
            raise serializers.ValidationError({"hora": "Horário fora da grade de atendimento."})

        if agora is not None and dia == hoje and hora <= agora:
            raise serializers.ValidationError({"hora": "Esse horário já passou."})

        attrs["servico"] = self._servico_obj
        return attrs


class AgendamentoPublicoSerializer(serializers.ModelSerializer):
    servico_nome = serializers.CharField(source="servico_label", read_only=True)
    hora = serializers.TimeField(format="%H:%M")

    class Meta:
        model = Agendamento
        fields = [
            "id", "servico", "servico_nome", "cliente_nome", "cliente_telefone",
            "data", "hora", "status", "status_pagamento",
        ]
