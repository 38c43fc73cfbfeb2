# agendamentos/disponibilidade.py
"""
Motor de disponibilidade da agenda.

Funções puras sobre um retrato (snapshot) do dia: reservas ativas + catálogo de
serviços. Nada aqui consulta o banco; quem chama (store / views) busca os dados
e passa tudo explicitamente.

Convenção única de sobreposição: intervalos semiabertos [início, fim),
[a, b) e [c, d) se sobrepõem sse a < d e c < b (`Intervalo.overlaps`).
Tanto o conjunto de horários ocupados quanto a checagem por duração usam esse
mesmo primitivo.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Hashable, Iterable, List, Mapping, Optional, Tuple, Union

log = logging.getLogger(__name__)

STATUS_ATIVOS = frozenset({"pending", "confirmed"})

# horários guardados com precisão de segundos (HH:MM:SS)
RESOLUCAO = timedelta(seconds=1)

HoraLike = Union[str, time]
DataLike = Union[str, date]


# ===================== Tipos =====================

@dataclass(frozen=True)
class ServicoSnapshot:
    id: Hashable
    nome: str
    duracao_min: int
    preco: object = None


@dataclass(frozen=True)
class ReservaSnapshot:
    data: DataLike
    hora: HoraLike
    servico_id: Hashable
    status: str = "pending"


@dataclass(frozen=True)
class Intervalo:
    start: datetime
    end: datetime

    def overlaps(self, other: "Intervalo") -> bool:
        return self.start < other.end and other.start < self.end

    def contains(self, instante: datetime) -> bool:
        return self.overlaps(Intervalo(instante, instante + RESOLUCAO))


@dataclass(frozen=True)
class AgendaConfig:
    """Grade fixa do dia: do primeiro ao último horário (inclusive), a cada `intervalo_min`."""
    primeiro_horario: time = time(8, 30)
    ultimo_horario: time = time(18, 0)
    intervalo_min: int = 30
    dias_fechados: frozenset = frozenset({6, 0})  # weekday(): domingo e segunda

    def horarios(self) -> Tuple[str, ...]:
        step = timedelta(minutes=self.intervalo_min or 30)
        cur = datetime.combine(date.min, self.primeiro_horario)
        end = datetime.combine(date.min, self.ultimo_horario)
        out: List[str] = []
        while cur <= end:
            out.append(cur.strftime("%H:%M"))
            cur += step
        return tuple(out)


CONFIG_PADRAO = AgendaConfig()


class Revalidacao(str, enum.Enum):
    OK = "ok"
    CONFLITO = "conflict"


# ===================== Normalização =====================

def normalize_time(raw: Optional[HoraLike]) -> Optional[str]:
    """
    "HH:MM" ou "HH:MM:SS" (ou datetime.time) -> "HH:MM:SS".
    Retorna None se não der para interpretar.
    """
    if raw is None:
        return None
    if isinstance(raw, time):
        return raw.strftime("%H:%M:%S")
    txt = str(raw).strip()
    if len(txt) == 5:
        txt = f"{txt}:00"
    try:
        return datetime.strptime(txt, "%H:%M:%S").strftime("%H:%M:%S")
    except ValueError:
        return None


def parse_time(raw: Optional[HoraLike]) -> Optional[time]:
    norm = normalize_time(raw)
    if norm is None:
        return None
    return datetime.strptime(norm, "%H:%M:%S").time()


def parse_date(raw: Optional[DataLike]) -> Optional[date]:
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    try:
        return datetime.strptime(str(raw).strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


# ===================== Intervalos =====================

def _intervalo(dia: date, inicio: time, duracao_min: int) -> Intervalo:
    start = datetime.combine(dia, inicio)
    return Intervalo(start, start + timedelta(minutes=duracao_min))


def _intervalo_reserva(
    reserva: ReservaSnapshot,
    dia: date,
    catalogo: Mapping[Hashable, ServicoSnapshot],
) -> Optional[Intervalo]:
    """
    Intervalo ocupado por uma reserva no `dia`, ou None se ela não conta:
    outro dia, status inativo, serviço desconhecido ou data/hora ilegível.
    """
    if reserva.status not in STATUS_ATIVOS:
        return None

    reserva_dia = parse_date(reserva.data)
    if reserva_dia is None:
        log.warning("[disponibilidade] data inválida ignorada: %r (servico=%s)", reserva.data, reserva.servico_id)
        return None
    if reserva_dia != dia:
        return None

    inicio = parse_time(reserva.hora)
    if inicio is None:
        log.warning("[disponibilidade] horário inválido ignorado: %r em %s", reserva.hora, dia)
        return None

    servico = catalogo.get(reserva.servico_id)
    if servico is None:
        log.debug("[disponibilidade] serviço %r não encontrado; reserva %s %s ignorada",
                  reserva.servico_id, dia, reserva.hora)
        return None
    if not servico.duracao_min or servico.duracao_min <= 0:
        log.warning("[disponibilidade] serviço %r sem duração válida; reserva ignorada", servico.id)
        return None

    return _intervalo(dia, inicio, int(servico.duracao_min))


def _intervalos_do_dia(
    dia: date,
    reservas: Iterable[ReservaSnapshot],
    catalogo: Mapping[Hashable, ServicoSnapshot],
) -> List[Intervalo]:
    out = []
    for r in reservas:
        it = _intervalo_reserva(r, dia, catalogo)
        if it is not None:
            out.append(it)
    return out


# ===================== Consultas =====================

def list_occupied_slots(
    dia: DataLike,
    reservas: Iterable[ReservaSnapshot],
    catalogo: Mapping[Hashable, ServicoSnapshot],
    config: AgendaConfig = CONFIG_PADRAO,
) -> frozenset:
    """
    Horários da grade cobertos por alguma reserva ativa do dia,
    independentemente do serviço que o cliente vai escolher.
    """
    d = parse_date(dia)
    if d is None:
        return frozenset()

    ocupados = set()
    intervalos = _intervalos_do_dia(d, reservas, catalogo)
    for label in config.horarios():
        instante = datetime.combine(d, parse_time(label))
        if any(it.contains(instante) for it in intervalos):
            ocupados.add(label)
    return frozenset(ocupados)


def is_slot_occupied_for_duration(
    slot: HoraLike,
    duracao_min: int,
    dia: DataLike,
    reservas: Iterable[ReservaSnapshot],
    catalogo: Mapping[Hashable, ServicoSnapshot],
) -> bool:
    """True se [slot, slot + duracao) colide com alguma reserva ativa do dia."""
    d = parse_date(dia)
    inicio = parse_time(slot)
    if d is None or inicio is None:
        log.warning("[disponibilidade] candidato inválido: dia=%r slot=%r", dia, slot)
        return False

    candidato = _intervalo(d, inicio, int(duracao_min))
    return any(candidato.overlaps(it) for it in _intervalos_do_dia(d, reservas, catalogo))


def is_closed_or_past(dia: date, hoje: date, config: AgendaConfig = CONFIG_PADRAO) -> bool:
    return dia.weekday() in config.dias_fechados or dia < hoje


# ===================== Retrato do dia =====================

@dataclass(frozen=True)
class DisponibilidadeDia:
    """
    Retrato imutável de um dia carregado: reservas ativas + catálogo.
    Para revalidar antes de gravar, carregue um retrato novo (não reaproveite este).
    """
    data: date
    reservas: Tuple[ReservaSnapshot, ...]
    catalogo: Mapping[Hashable, ServicoSnapshot]
    hoje: date
    config: AgendaConfig = CONFIG_PADRAO
    ocupados: frozenset = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "reservas", tuple(self.reservas))
        object.__setattr__(
            self, "ocupados",
            list_occupied_slots(self.data, self.reservas, self.catalogo, self.config),
        )

    def servico(self, servico_id: Optional[Hashable]) -> Optional[ServicoSnapshot]:
        if servico_id is None or servico_id == "":
            return None
        return self.catalogo.get(servico_id)

    def is_slot_occupied_for_duration(self, slot: HoraLike, duracao_min: int) -> bool:
        return is_slot_occupied_for_duration(slot, duracao_min, self.data, self.reservas, self.catalogo)

    def is_slot_available(self, slot: HoraLike, servico_id: Optional[Hashable] = None) -> bool:
        """
        Sem serviço escolhido, vale só o conjunto de ocupados (conservador:
        a duração real ainda é desconhecida).
        """
        norm = normalize_time(slot)
        if norm is None:
            log.warning("[disponibilidade] horário inválido consultado: %r em %s", slot, self.data)
            return False
        label = norm[:5]   # o conjunto de ocupados guarda HH:MM
        if label in self.ocupados:
            return False
        servico = self.servico(servico_id)
        if servico is None:
            return True
        return not self.is_slot_occupied_for_duration(label, servico.duracao_min)

    def is_date_fully_booked(self, dia: Optional[date] = None) -> bool:
        """
        Dia indisponível: fechado, passado ou, só para o dia deste retrato,
        com todos os horários ocupados. Outros dias são tratados como livres
        (não há busca antecipada das reservas de cada dia).
        """
        dia = dia or self.data
        if is_closed_or_past(dia, self.hoje, self.config):
            return True
        if dia == self.data:
            return set(self.config.horarios()) <= self.ocupados
        return False

    def slots(self, servico_id: Optional[Hashable] = None) -> List[dict]:
        return [
            {
                "horario": label,
                "ocupado": label in self.ocupados,
                "disponivel": self.is_slot_available(label, servico_id),
            }
            for label in self.config.horarios()
        ]

    def revalidate_before_commit(self, slot: str, servico_id: Hashable) -> Revalidacao:
        return revalidate_before_commit(slot, servico_id, self)


def revalidate_before_commit(slot: str, servico_id: Hashable, fresh: DisponibilidadeDia) -> Revalidacao:
    """
    Última checagem antes do insert, contra um retrato recém-carregado.
    Serviço que sumiu do catálogo conta como conflito: não dá para medir o intervalo.
    """
    servico = fresh.servico(servico_id)
    if servico is None:
        log.warning("[disponibilidade] revalidação sem serviço %r em %s %s", servico_id, fresh.data, slot)
        return Revalidacao.CONFLITO
    if fresh.is_slot_occupied_for_duration(slot, servico.duracao_min):
        log.info("[disponibilidade] conflito na revalidação: %s %s (servico=%s)", fresh.data, slot, servico_id)
        return Revalidacao.CONFLITO
    return Revalidacao.OK
