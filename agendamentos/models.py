# agendamentos/models.py
from __future__ import annotations

from datetime import datetime, timedelta

from django.core.exceptions import ValidationError
from django.db import models


class TransicaoInvalida(ValueError):
    """Mudança de status fora do ciclo de vida permitido."""


class StatusAgendamento(models.TextChoices):
    PENDENTE   = "pending",   "Pendente"
    CONFIRMADO = "confirmed", "Confirmado"
    CANCELADO  = "cancelled", "Cancelado"
    CONCLUIDO  = "completed", "Concluído"


class StatusPagamento(models.TextChoices):
    PENDENTE    = "pending",  "Pendente"
    PAGO        = "paid",     "Pago"
    REEMBOLSADO = "refunded", "Reembolsado"


# Só esses ocupam horário na agenda
STATUS_ATIVOS = (StatusAgendamento.PENDENTE, StatusAgendamento.CONFIRMADO)

TRANSICOES: dict[str, frozenset] = {
    StatusAgendamento.PENDENTE:   frozenset({StatusAgendamento.CONFIRMADO, StatusAgendamento.CANCELADO}),
    StatusAgendamento.CONFIRMADO: frozenset({StatusAgendamento.CONCLUIDO, StatusAgendamento.CANCELADO}),
    StatusAgendamento.CANCELADO:  frozenset(),
    StatusAgendamento.CONCLUIDO:  frozenset(),
}


class Agendamento(models.Model):
    """
    Reserva feita pelo site (ou pelo painel).
    Nasce PENDENTE; depois só o painel muda status/pagamento ou exclui.
    """
    servico = models.ForeignKey(
        "servicos.Servico",
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name="agendamentos",
    )
    servico_nome = models.CharField(max_length=120, blank=True)

    cliente_nome = models.CharField(max_length=120)
    cliente_telefone = models.CharField(max_length=32)

    data = models.DateField()
    hora = models.TimeField()

    status = models.CharField(
        max_length=12,
        choices=StatusAgendamento.choices,
        default=StatusAgendamento.PENDENTE,
    )
    status_pagamento = models.CharField(
        max_length=12,
        choices=StatusPagamento.choices,
        default=StatusPagamento.PENDENTE,
    )
    observacoes = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-data", "-hora"]
        indexes = [
            models.Index(fields=["data", "status"], name="agendamento_data_status_idx"),
            models.Index(fields=["status"], name="agendamento_status_idx"),
        ]

    # ----------------- util -----------------
    def __str__(self):
        return f"{self.cliente_nome} — {self.servico_label} ({self.data:%d/%m} {self.hora:%H:%M})"

    @property
    def servico_label(self) -> str:
        if self.servico_id and getattr(self.servico, "nome", None):
            return self.servico.nome
        return self.servico_nome or "Serviço"

    @property
    def ocupa_agenda(self) -> bool:
        return self.status in STATUS_ATIVOS

    def fim_previsto(self) -> datetime | None:
        """Início + duração do serviço (None se o serviço foi removido)."""
        if not (self.servico_id and self.data and self.hora):
            return None
        inicio = datetime.combine(self.data, self.hora)
        return inicio + timedelta(minutes=int(self.servico.duracao_min))

    def save(self, *args, **kwargs):
        # snapshot do nome do serviço para quando ele for removido do catálogo
        if self.servico_id and not self.servico_nome:
            self.servico_nome = self.servico.nome
        super().save(*args, **kwargs)

    # ----------------- ciclo de vida -----------------
    @staticmethod
    def pode_transicionar(atual: str, novo: str) -> bool:
        return atual == novo or novo in TRANSICOES.get(atual, frozenset())

    def _status_no_banco(self) -> str | None:
        if not self.pk:
            return None
        return type(self).objects.filter(pk=self.pk).values_list("status", flat=True).first()

    def clean(self):
        super().clean()
        anterior = self._status_no_banco()
        if anterior and not self.pode_transicionar(anterior, self.status):
            raise ValidationError({
                "status": f"Não é possível mudar de {StatusAgendamento(anterior).label} "
                          f"para {StatusAgendamento(self.status).label}."
            })

    def mudar_status(self, novo: str, save: bool = True):
        """Aplica a transição (idempotente para o mesmo status)."""
        if not self.pode_transicionar(self.status, novo):
            raise TransicaoInvalida(
                f"Transição inválida: {self.status} -> {novo} (agendamento {self.pk})."
            )
        if self.status != novo:
            self.status = novo
            if save:
                self.save(update_fields=["status", "updated_at"])
        return self

    def confirmar(self, save: bool = True):
        return self.mudar_status(StatusAgendamento.CONFIRMADO, save=save)

    def cancelar(self, save: bool = True):
        return self.mudar_status(StatusAgendamento.CANCELADO, save=save)

    def concluir(self, save: bool = True):
        return self.mudar_status(StatusAgendamento.CONCLUIDO, save=save)

    def marcar_pago(self, save: bool = True):
        return self._set_pagamento(StatusPagamento.PAGO, save)

    def reembolsar(self, save: bool = True):
        if self.status_pagamento != StatusPagamento.PAGO:
            raise TransicaoInvalida("Só é possível reembolsar agendamentos pagos.")
        return self._set_pagamento(StatusPagamento.REEMBOLSADO, save)

    def _set_pagamento(self, novo: str, save: bool):
        if self.status_pagamento != novo:
            self.status_pagamento = novo
            if save:
                self.save(update_fields=["status_pagamento", "updated_at"])
        return self
