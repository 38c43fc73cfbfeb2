# agendamentos/store.py
"""
Acesso ao banco para a agenda: monta os retratos que o motor de
disponibilidade consome e grava novas reservas após revalidar.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from typing import Dict, Optional, Tuple

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone

from servicos.models import Servico
from .disponibilidade import (
    AgendaConfig,
    DisponibilidadeDia,
    ReservaSnapshot,
    Revalidacao,
    ServicoSnapshot,
    parse_time,
)
from .models import Agendamento, StatusAgendamento, StatusPagamento, STATUS_ATIVOS

log = logging.getLogger(__name__)


class StoreUnavailable(Exception):
    """Falha ao ler/gravar no banco (rede, lock, banco fora do ar)."""


def agenda_config_from_settings() -> AgendaConfig:
    return AgendaConfig(
        primeiro_horario=parse_time(getattr(settings, "SALAO_PRIMEIRO_HORARIO", "08:30")) or time(8, 30),
        ultimo_horario=parse_time(getattr(settings, "SALAO_ULTIMO_HORARIO", "18:00")) or time(18, 0),
        intervalo_min=int(getattr(settings, "SALAO_INTERVALO_MIN", 30) or 30),
        dias_fechados=frozenset(getattr(settings, "SALAO_DIAS_FECHADOS", (6, 0))),
    )


# ===================== Leitura =====================

def fetch_active_bookings(dia: date) -> Tuple[ReservaSnapshot, ...]:
    """Reservas PENDENTES/CONFIRMADAS do dia: (data, hora, servico_id)."""
    try:
        rows = list(
            Agendamento.objects
            .filter(data=dia, status__in=STATUS_ATIVOS)
            .values_list("data", "hora", "servico_id", "status")
        )
    except DatabaseError as e:
        log.exception("[agendamentos] falha ao buscar reservas de %s", dia)
        raise StoreUnavailable(str(e)) from e
    return tuple(ReservaSnapshot(data=d, hora=h, servico_id=s, status=st) for d, h, s, st in rows)


def fetch_service_catalog() -> Dict[int, ServicoSnapshot]:
    """
    Catálogo completo (inclui inativos: reservas antigas de serviços
    desativados continuam ocupando horário).
    """
    try:
        rows = list(Servico.objects.values_list("id", "nome", "duracao_min", "preco"))
    except DatabaseError as e:
        log.exception("[agendamentos] falha ao buscar catálogo de serviços")
        raise StoreUnavailable(str(e)) from e
    return {pk: ServicoSnapshot(id=pk, nome=nome, duracao_min=dur, preco=preco) for pk, nome, dur, preco in rows}


def load_day(
    dia: date,
    config: Optional[AgendaConfig] = None,
    hoje: Optional[date] = None,
) -> DisponibilidadeDia:
    return DisponibilidadeDia(
        data=dia,
        reservas=fetch_active_bookings(dia),
        catalogo=fetch_service_catalog(),
        hoje=hoje or timezone.localdate(),
        config=config or agenda_config_from_settings(),
    )


def empty_day(dia: date, config: Optional[AgendaConfig] = None, hoje: Optional[date] = None) -> DisponibilidadeDia:
    """Retrato sem reservas (usado quando o banco falha na leitura)."""
    return DisponibilidadeDia(
        data=dia,
        reservas=(),
        catalogo={},
        hoje=hoje or timezone.localdate(),
        config=config or agenda_config_from_settings(),
    )


# ===================== Escrita =====================

def insert_booking(
    *,
    servico: Servico,
    cliente_nome: str,
    cliente_telefone: str,
    dia: date,
    hora: time,
    status_pagamento: str = StatusPagamento.PENDENTE,
    observacoes: str | None = None,
) -> Agendamento:
    return Agendamento.objects.create(
        servico=servico,
        servico_nome=servico.nome,
        cliente_nome=cliente_nome,
        cliente_telefone=cliente_telefone,
        data=dia,
        hora=hora,
        status=StatusAgendamento.PENDENTE,
        status_pagamento=status_pagamento,
        observacoes=observacoes or None,
    )


@dataclass(frozen=True)
class ResultadoReserva:
    resultado: Revalidacao
    agendamento: Optional[Agendamento] = None

    @property
    def ok(self) -> bool:
        return self.resultado is Revalidacao.OK


def create_booking_if_available(
    *,
    servico: Servico,
    cliente_nome: str,
    cliente_telefone: str,
    dia: date,
    hora: time,
    status_pagamento: str = StatusPagamento.PENDENTE,
    observacoes: str | None = None,
    config: Optional[AgendaConfig] = None,
) -> ResultadoReserva:
    """
    Recarrega o dia, revalida o horário e só então grava.

    Não há constraint única no banco: duas submissões que passem pela
    revalidação na mesma janela ainda podem colidir (risco residual aceito).
    """
    slot = hora.strftime("%H:%M")
    try:
        with transaction.atomic():
            fresh = load_day(dia, config=config)
            if fresh.revalidate_before_commit(slot, servico.pk) is Revalidacao.CONFLITO:
                return ResultadoReserva(Revalidacao.CONFLITO)
            ag = insert_booking(
                servico=servico,
                cliente_nome=cliente_nome,
                cliente_telefone=cliente_telefone,
                dia=dia,
                hora=hora,
                status_pagamento=status_pagamento,
                observacoes=observacoes,
            )
    except DatabaseError as e:
        log.exception("[agendamentos] falha ao gravar reserva %s %s", dia, slot)
        raise StoreUnavailable(str(e)) from e

    log.info("[agendamentos] reserva criada id=%s %s %s servico=%s pagamento=%s",
             ag.pk, dia, slot, servico.pk, status_pagamento)
    return ResultadoReserva(Revalidacao.OK, ag)
