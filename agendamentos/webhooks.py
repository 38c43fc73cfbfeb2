# agendamentos/webhooks.py
import logging
import requests
from typing import Optional, Mapping
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from .models import Agendamento

logger = logging.getLogger(__name__)

HEADER_TOKEN = getattr(settings, "OUTBOUND_HEADER_TOKEN", "X-Webhook-Token")


def _payload(ag: Agendamento, evento: str, extra: Optional[Mapping[str, object]] = None) -> dict:
    payload = {
        "evento": evento,
        "timestamp": timezone.now().isoformat(),
        "agendamento_id": ag.pk,
        "status": ag.status,
        "status_pagamento": ag.status_pagamento,
        "data": ag.data.isoformat(),
        "hora": ag.hora.strftime("%H:%M"),
        "servico": ag.servico_label,
        "nome": ag.cliente_nome,
        "telefone": ag.cliente_telefone,
    }
    if extra:
        payload.update(extra)
    return payload


def disparar_webhook_agendamento(
    ag: Agendamento,
    *,
    evento: str = "agendamento_criado",
    extra: Optional[Mapping[str, object]] = None,
) -> bool:
    """
    Agenda o POST para OUTBOUND_BOOKING_WEBHOOK após o commit da transação.
    Retorna False quando não há URL configurada. Falhas de rede só vão para o log.
    """
    url = getattr(settings, "OUTBOUND_BOOKING_WEBHOOK", "") or ""
    if not url:
        logger.debug("[agendamentos] %s sem webhook configurado (ag=%s)", evento, ag.pk)
        return False

    body = _payload(ag, evento, extra)
    headers = {
        "Content-Type": "application/json",
        HEADER_TOKEN: getattr(settings, "OUTBOUND_WEBHOOK_TOKEN", ""),
    }
    timeout = getattr(settings, "OUTBOUND_WEBHOOK_TIMEOUT", 8)

    def _send():
        try:
            resp = requests.post(url, json=body, headers=headers, timeout=timeout)
            resp.raise_for_status()
            logger.info("[agendamentos] webhook %s OK (ag=%s)", evento, ag.pk)
        except requests.RequestException as e:
            # não vazar token nos logs
            logger.exception("[agendamentos] webhook %s falhou (ag=%s): %s", evento, ag.pk, e)

    transaction.on_commit(_send)
    return True
