# agendamentos/signals.py
from __future__ import annotations

import logging

from django.db.models.signals import pre_save, post_save
from django.dispatch import receiver

from .models import Agendamento, StatusAgendamento

log = logging.getLogger(__name__)


@receiver(pre_save, sender=Agendamento)
def agendamento_pre_save(sender, instance: Agendamento, **kwargs):
    """
    - Na criação: força status = PENDENTE.
    - Loga transições de status e de pagamento (somente log).
    """
    if instance._state.adding:
        if instance.status != StatusAgendamento.PENDENTE:
            log.warning(
                "[signals][pre_save] Forçando PENDENTE na criação (recebido=%s, %s %s)",
                instance.status, instance.data, instance.hora,
            )
            instance.status = StatusAgendamento.PENDENTE
        return

    old = sender.objects.filter(pk=instance.pk).values("status", "status_pagamento").first()
    if not old:
        return

    if old["status"] != instance.status:
        log.info("[signals][pre_save] Status mudando id=%s %s -> %s",
                 instance.pk, old["status"], instance.status)
    if old["status_pagamento"] != instance.status_pagamento:
        log.info("[signals][pre_save] Pagamento mudando id=%s %s -> %s",
                 instance.pk, old["status_pagamento"], instance.status_pagamento)


@receiver(post_save, sender=Agendamento)
def agendamento_post_save(sender, instance: Agendamento, created: bool, **kwargs):
    if created:
        log.info("[signals][post_save] Novo agendamento id=%s %s %s servico=%s",
                 instance.pk, instance.data, instance.hora, instance.servico_id)
