from __future__ import annotations

from datetime import time

import pytest
from django.urls import reverse

from agendamentos.models import Agendamento, StatusAgendamento, StatusPagamento

pytestmark = pytest.mark.django_db

URL_LISTA = reverse("admin:agendamentos_agendamento_changelist")


def executar(admin_client, acao, *ags):
    return admin_client.post(URL_LISTA, {
        "action": acao,
        "_selected_action": [ag.pk for ag in ags],
    })


def test_lista_abre(admin_client, servico_60, dia_aberto, reservar):
    reservar(servico_60, dia_aberto, time(9, 0))
    assert admin_client.get(URL_LISTA).status_code == 200


def test_confirmar_e_concluir(admin_client, servico_60, dia_aberto, reservar):
    ag = reservar(servico_60, dia_aberto, time(9, 0))
    executar(admin_client, "action_confirmar", ag)
    ag.refresh_from_db()
    assert ag.status == StatusAgendamento.CONFIRMADO

    executar(admin_client, "action_concluir", ag)
    ag.refresh_from_db()
    assert ag.status == StatusAgendamento.CONCLUIDO


def test_acao_invalida_nao_altera(admin_client, servico_60, dia_aberto, reservar):
    pendente = reservar(servico_60, dia_aberto, time(9, 0))
    cancelado = reservar(servico_60, dia_aberto, time(11, 0), status=StatusAgendamento.CANCELADO)

    resp = executar(admin_client, "action_concluir", pendente, cancelado)
    assert resp.status_code == 302
    pendente.refresh_from_db()
    cancelado.refresh_from_db()
    assert pendente.status == StatusAgendamento.PENDENTE
    assert cancelado.status == StatusAgendamento.CANCELADO


def test_pagamento_pelo_painel(admin_client, servico_60, dia_aberto, reservar):
    ag = reservar(servico_60, dia_aberto, time(9, 0))
    executar(admin_client, "action_reembolsar", ag)
    ag.refresh_from_db()
    assert ag.status_pagamento == StatusPagamento.PENDENTE

    executar(admin_client, "action_marcar_pago", ag)
    executar(admin_client, "action_reembolsar", ag)
    ag.refresh_from_db()
    assert ag.status_pagamento == StatusPagamento.REEMBOLSADO


def test_cancelar_libera_horario(admin_client, servico_60, dia_aberto, reservar):
    from agendamentos.store import load_day

    ag = reservar(servico_60, dia_aberto, time(9, 0))
    assert "09:00" in load_day(dia_aberto).ocupados
    executar(admin_client, "action_cancelar", ag)
    assert "09:00" not in load_day(dia_aberto).ocupados


def test_painel_nao_cria_reserva(admin_client, servico_60, dia_aberto, reservar):
    reservar(servico_60, dia_aberto, time(9, 0))
    url = reverse("admin:agendamentos_agendamento_add")
    assert admin_client.get(url).status_code == 403

    resp = admin_client.post(url, {
        "servico": servico_60.pk,
        "cliente_nome": "Outra",
        "cliente_telefone": "5583977776666",
        "data": dia_aberto.isoformat(),
        "hora": "09:30",
        "status": StatusAgendamento.PENDENTE,
        "status_pagamento": StatusPagamento.PENDENTE,
    })
    assert resp.status_code == 403
    assert Agendamento.objects.filter(data=dia_aberto).count() == 1


def test_edicao_nao_move_horario(admin_client, servico_60, servico_90, dia_aberto, reservar):
    reservar(servico_60, dia_aberto, time(9, 0))
    ag = reservar(servico_60, dia_aberto, time(11, 0))
    url = reverse("admin:agendamentos_agendamento_change", args=[ag.pk])

    resp = admin_client.post(url, {
        "servico": servico_90.pk,
        "cliente_nome": "Maria",
        "cliente_telefone": "5583988887777",
        "data": dia_aberto.isoformat(),
        "hora": "09:30",
        "status": StatusAgendamento.CONFIRMADO,
        "status_pagamento": StatusPagamento.PENDENTE,
        "observacoes": "",
    })
    assert resp.status_code == 302
    ag.refresh_from_db()
    assert ag.hora == time(11, 0)
    assert ag.servico_id == servico_60.pk
    assert ag.status == StatusAgendamento.CONFIRMADO


def test_servicos_ativar_desativar(admin_client, servico_60):
    url = reverse("admin:servicos_servico_changelist")
    admin_client.post(url, {"action": "desativar", "_selected_action": [servico_60.pk]})
    servico_60.refresh_from_db()
    assert servico_60.ativo is False

    admin_client.post(url, {"action": "ativar", "_selected_action": [servico_60.pk]})
    servico_60.refresh_from_db()
    assert servico_60.ativo is True
