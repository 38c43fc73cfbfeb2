# agendamentos/mensagens.py
from __future__ import annotations

from core.contacts import whatsapp_link
from .models import Agendamento, StatusPagamento


def mensagem_agendamento(ag: Agendamento) -> str:
    """Texto enviado ao salão pelo WhatsApp depois que a reserva foi aceita."""
    if ag.status_pagamento == StatusPagamento.PAGO:
        pagamento = "\n\n✅ *Pagamento:* Pago via PIX"
    else:
        pagamento = "\n\n💳 *Pagamento:* Será realizado presencialmente"
    return (
        "Olá! Gostaria de agendar:\n\n"
        f"*Serviço:* {ag.servico_label}\n"
        f"*Data:* {ag.data:%d/%m/%Y}\n"
        f"*Horário:* {ag.hora:%H:%M}\n"
        f"*Nome:* {ag.cliente_nome}\n"
        f"*Telefone:* {ag.cliente_telefone}"
        f"{pagamento}"
    )


def link_whatsapp(ag: Agendamento, numero_salao: str | None) -> str:
    return whatsapp_link(numero_salao, mensagem_agendamento(ag))
