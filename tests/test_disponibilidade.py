"""
Motor de disponibilidade: funções puras sobre retratos do dia (sem banco).
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time

import pytest

from agendamentos.disponibilidade import (
    CONFIG_PADRAO,
    AgendaConfig,
    DisponibilidadeDia,
    Intervalo,
    ReservaSnapshot,
    Revalidacao,
    ServicoSnapshot,
    is_closed_or_past,
    is_slot_occupied_for_duration,
    list_occupied_slots,
    normalize_time,
    revalidate_before_commit,
)

DIA = date(2030, 1, 8)      # terça
HOJE = date(2030, 1, 1)

CATALOGO = {
    "S1": ServicoSnapshot(id="S1", nome="Corte", duracao_min=60),
    "S90": ServicoSnapshot(id="S90", nome="Escova", duracao_min=90),
    "S30": ServicoSnapshot(id="S30", nome="Manicure", duracao_min=30),
}


def retrato(reservas, dia=DIA, hoje=HOJE, catalogo=CATALOGO):
    return DisponibilidadeDia(data=dia, reservas=tuple(reservas), catalogo=catalogo, hoje=hoje)


# ---------- grade ----------

def test_grade_padrao_vai_de_0830_a_1800():
    horarios = CONFIG_PADRAO.horarios()
    assert horarios[0] == "08:30"
    assert horarios[-1] == "18:00"
    assert len(horarios) == 20
    assert "12:00" in horarios


def test_grade_respeita_configuracao():
    cfg = AgendaConfig(primeiro_horario=time(9, 0), ultimo_horario=time(10, 0), intervalo_min=20)
    assert cfg.horarios() == ("09:00", "09:20", "09:40", "10:00")


# ---------- normalização ----------

@pytest.mark.parametrize("raw,esperado", [
    ("09:00", "09:00:00"),
    ("09:00:00", "09:00:00"),
    (" 14:30 ", "14:30:00"),
    (time(8, 30), "08:30:00"),
    ("9h", None),
    ("", None),
    (None, None),
])
def test_normalize_time(raw, esperado):
    assert normalize_time(raw) == esperado


# ---------- sobreposição ----------

@pytest.mark.parametrize("a,b,c,d", [
    (9, 10, 10, 11),     # encostados: não sobrepõem
    (9, 11, 10, 12),
    (9, 12, 10, 11),     # contido
    (9, 10, 9, 10),
    (8, 9, 10, 11),
])
def test_overlap_simetrico(a, b, c, d):
    i1 = Intervalo(datetime(2030, 1, 8, a), datetime(2030, 1, 8, b))
    i2 = Intervalo(datetime(2030, 1, 8, c), datetime(2030, 1, 8, d))
    assert i1.overlaps(i2) == i2.overlaps(i1) == (a < d and c < b)


def test_occupied_for_duration_simetrico():
    # reserva 09:00 (60) vs candidato 09:30 (60)  <=>  reserva 09:30 (60) vs candidato 09:00 (60)
    r1 = [ReservaSnapshot(DIA, "09:00", "S1")]
    r2 = [ReservaSnapshot(DIA, "09:30", "S1")]
    assert is_slot_occupied_for_duration("09:30", 60, DIA, r1, CATALOGO) is True
    assert is_slot_occupied_for_duration("09:00", 60, DIA, r2, CATALOGO) is True
    # encostados nos dois sentidos
    assert is_slot_occupied_for_duration("10:00", 60, DIA, r1, CATALOGO) is False
    r3 = [ReservaSnapshot(DIA, "10:00", "S1")]
    assert is_slot_occupied_for_duration("09:00", 60, DIA, r3, CATALOGO) is False


# ---------- conjunto de ocupados ----------

def test_reserva_de_90_minutos_ocupa_tres_horarios():
    reservas = [ReservaSnapshot(DIA, "09:00", "S90", "confirmed")]
    assert list_occupied_slots(DIA, reservas, CATALOGO) == {"09:00", "09:30", "10:00"}


def test_reserva_fora_da_grade_ocupa_horarios_cobertos():
    reservas = [ReservaSnapshot(DIA, "09:15:00", "S30")]
    # [09:15, 09:45) cobre o instante 09:30
    assert list_occupied_slots(DIA, reservas, CATALOGO) == {"09:30"}


def test_ignora_cancelados_concluidos_outros_dias_e_servico_desconhecido():
    reservas = [
        ReservaSnapshot(DIA, "09:00", "S1", "cancelled"),
        ReservaSnapshot(DIA, "10:00", "S1", "completed"),
        ReservaSnapshot(date(2030, 1, 9), "11:00", "S1"),
        ReservaSnapshot(DIA, "12:00", "sumiu"),
    ]
    assert list_occupied_slots(DIA, reservas, CATALOGO) == frozenset()


def test_horario_ilegivel_e_ignorado_e_logado(caplog):
    reservas = [ReservaSnapshot(DIA, "nove horas", "S1"), ReservaSnapshot(DIA, "14:00", "S30")]
    with caplog.at_level(logging.WARNING, logger="agendamentos.disponibilidade"):
        ocupados = list_occupied_slots(DIA, reservas, CATALOGO)
    assert ocupados == {"14:00"}
    assert "horário inválido" in caplog.text


def test_list_occupied_slots_e_idempotente():
    reservas = [ReservaSnapshot(DIA, "09:00", "S90"), ReservaSnapshot("2030-01-08", "15:00:00", "S1")]
    primeira = list_occupied_slots(DIA, reservas, CATALOGO)
    segunda = list_occupied_slots(DIA, reservas, CATALOGO)
    assert primeira == segunda
    assert reservas == [ReservaSnapshot(DIA, "09:00", "S90"), ReservaSnapshot("2030-01-08", "15:00:00", "S1")]


# ---------- disponibilidade por horário ----------

def test_cenario_s1():
    snap = DisponibilidadeDia(
        data=date(2025, 6, 10),
        reservas=(ReservaSnapshot("2025-06-10", "09:00", "S1", "confirmed"),),
        catalogo={"S1": ServicoSnapshot(id="S1", nome="S1", duracao_min=60)},
        hoje=date(2025, 6, 1),
    )
    assert snap.is_slot_available("09:00", "S1") is False
    assert snap.is_slot_available("09:30", "S1") is False
    assert snap.is_slot_available("10:00", "S1") is True


def test_servico_longo_bloqueia_horario_anterior_livre():
    snap = retrato([ReservaSnapshot(DIA, "10:00", "S1")])
    assert "09:00" not in snap.ocupados
    assert snap.is_slot_available("09:00") is True          # sem serviço: só o conjunto
    assert snap.is_slot_available("09:00", "S90") is False  # 09:00-10:30 invade 10:00
    assert snap.is_slot_available("09:00", "S30") is True


def test_dia_sem_reservas_tudo_livre_para_qualquer_servico():
    snap = retrato([])
    for servico_id in (None, "S1", "S90", "S30"):
        assert all(snap.is_slot_available(h, servico_id) for h in CONFIG_PADRAO.horarios())


def test_servico_desconhecido_cai_no_conjunto_de_ocupados():
    snap = retrato([ReservaSnapshot(DIA, "09:00", "S1")])
    assert snap.is_slot_available("08:30", "nao-existe") is True
    assert snap.is_slot_available("09:30", "nao-existe") is False


def test_slots_lista_a_grade_com_flags():
    snap = retrato([ReservaSnapshot(DIA, "09:00", "S1")])
    linhas = {s["horario"]: s for s in snap.slots("S90")}
    assert len(linhas) == 20
    assert linhas["09:00"] == {"horario": "09:00", "ocupado": True, "disponivel": False}
    assert linhas["08:30"] == {"horario": "08:30", "ocupado": False, "disponivel": False}
    assert linhas["10:00"]["disponivel"] is True


# ---------- datas ----------

@pytest.mark.parametrize("dia", [date(2030, 1, 6), date(2030, 1, 7)])   # domingo, segunda
def test_dia_fechado_indisponivel(dia):
    assert is_closed_or_past(dia, HOJE) is True
    assert retrato([], dia=dia).is_date_fully_booked() is True


def test_dia_passado_indisponivel():
    snap = retrato([], dia=date(2029, 12, 25), hoje=HOJE)   # terça, já passou
    assert snap.is_date_fully_booked() is True


def test_dia_lotado():
    reservas = [ReservaSnapshot(DIA, h, "S30") for h in CONFIG_PADRAO.horarios()]
    snap = retrato(reservas)
    assert snap.is_date_fully_booked() is True


def test_dia_quase_lotado_ainda_disponivel():
    reservas = [ReservaSnapshot(DIA, h, "S30") for h in CONFIG_PADRAO.horarios()[:-1]]
    assert retrato(reservas).is_date_fully_booked() is False


def test_outras_datas_so_checam_fechado_ou_passado():
    reservas = [ReservaSnapshot(DIA, h, "S30") for h in CONFIG_PADRAO.horarios()]
    snap = retrato(reservas)
    assert snap.is_date_fully_booked(date(2030, 1, 9)) is False
    assert snap.is_date_fully_booked(date(2030, 1, 13)) is True     # domingo


# ---------- revalidação ----------

def test_revalidacao_detecta_reserva_concorrente():
    visto = retrato([])
    assert visto.is_slot_available("14:00", "S1") is True

    # outra sessão grava 14:00 antes do nosso commit
    novo = retrato([ReservaSnapshot(DIA, "14:00", "S1")])
    assert revalidate_before_commit("14:00", "S1", novo) is Revalidacao.CONFLITO
    assert novo.revalidate_before_commit("14:00", "S1") is Revalidacao.CONFLITO


def test_revalidacao_ok_quando_livre():
    novo = retrato([ReservaSnapshot(DIA, "14:00", "S1")])
    assert novo.revalidate_before_commit("15:00", "S1") is Revalidacao.OK


def test_revalidacao_servico_sumido_e_conflito():
    assert retrato([]).revalidate_before_commit("10:00", "sumiu") is Revalidacao.CONFLITO


def test_is_slot_available_normaliza_horario():
    snap = retrato([ReservaSnapshot(DIA, "09:00", "S1")])
    assert snap.is_slot_available("09:00:00") is False
    assert snap.is_slot_available(time(9, 30)) is False
    assert snap.is_slot_available("10:00:00") is True
    assert snap.is_slot_available("10:00:00", "S1") is True


def test_is_slot_available_horario_ilegivel():
    assert retrato([]).is_slot_available("nove") is False
