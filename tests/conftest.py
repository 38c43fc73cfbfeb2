# tests/conftest.py
from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from agendamentos.models import Agendamento, StatusAgendamento
from configuracoes.models import ConfiguracaoSite
from servicos.models import Servico


def proxima_data_aberta(dias_a_frente: int = 7) -> date:
    """Próxima terça-feira com pelo menos `dias_a_frente` dias de distância."""
    d = date.today() + timedelta(days=dias_a_frente)
    while d.weekday() != 1:
        d += timedelta(days=1)
    return d


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def dia_aberto() -> date:
    return proxima_data_aberta()


@pytest.fixture
def servico_60(db):
    return Servico.objects.create(nome="Teste corte 60", duracao_min=60, preco=Decimal("70.00"))


@pytest.fixture
def servico_90(db):
    return Servico.objects.create(nome="Teste escova 90", duracao_min=90, preco=Decimal("95.00"))


@pytest.fixture
def site(db):
    cfg = ConfiguracaoSite.carregar()
    cfg.telefone = "5583999990000"
    cfg.instagram = "@salao"
    cfg.endereco = "Rua das Flores, 10"
    cfg.save()
    return cfg


@pytest.fixture
def reservar(db):
    """Cria um agendamento direto no banco (status final aplicado após a criação)."""
    def _reservar(servico, dia, hora, status=StatusAgendamento.PENDENTE, **extra):
        ag = Agendamento.objects.create(
            servico=servico,
            cliente_nome=extra.pop("cliente_nome", "Maria"),
            cliente_telefone=extra.pop("cliente_telefone", "5583988887777"),
            data=dia,
            hora=hora,
            **extra,
        )
        if status != StatusAgendamento.PENDENTE:
            Agendamento.objects.filter(pk=ag.pk).update(status=status)
            ag.refresh_from_db()
        return ag
    return _reservar
