# agendamentos/api_views.py
from __future__ import annotations

import logging
from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date

from django.db import DatabaseError
from django.utils import timezone

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from configuracoes.models import ConfiguracaoSite
from core.pix import gerar_payload_pix
from servicos.models import Servico
from .disponibilidade import is_closed_or_past, parse_date
from .mensagens import link_whatsapp
from .models import StatusPagamento
from .serializers import AgendamentoIntakeSerializer, AgendamentoPublicoSerializer
from .store import (
    StoreUnavailable,
    agenda_config_from_settings,
    create_booking_if_available,
    empty_day,
    load_day,
)
from .webhooks import disparar_webhook_agendamento

log = logging.getLogger(__name__)

MSG_CONFLITO = "Desculpe — esse horário acabou de ser reservado. Escolha outro horário."
MSG_FALHA_GRAVACAO = "Erro ao realizar agendamento. Tente novamente."
MSG_FALHA_LEITURA = "Erro ao carregar os horários. A disponibilidade exibida pode estar incompleta."
MSG_PIX_AUSENTE = "Chave PIX não configurada. Entre em contato com o salão."


def _safe_int(s: str | None) -> int | None:
    try:
        return int((s or "").strip())
    except (TypeError, ValueError):
        return None


def _erro(msg: str, http_status: int) -> Response:
    return Response({"ok": False, "erro": msg}, status=http_status)


# ===================== Disponibilidade =====================

class DisponibilidadeView(APIView):
    """
    GET ?date=YYYY-MM-DD[&service_id=<id>]
      -> { "data", "data_indisponivel", "ocupados": [...], "horarios": [{horario, ocupado, disponivel}] }
    Nunca grava nada.
    """

    def get(self, request, *args, **kwargs):
        dia = parse_date(request.query_params.get("date"))
        if dia is None:
            return _erro("date requerido (YYYY-MM-DD)", status.HTTP_400_BAD_REQUEST)

        raw_service = (request.query_params.get("service_id") or "").strip()
        service_id = _safe_int(raw_service) if raw_service else None
        if raw_service and service_id is None:
            return _erro("service_id inválido", status.HTTP_400_BAD_REQUEST)

        config = agenda_config_from_settings()
        hoje = timezone.localdate()
        body = {}
        try:
            snapshot = load_day(dia, config=config, hoje=hoje)
        except StoreUnavailable:
            # sem reservas conhecidas: pode sub-reportar ocupação (limitação aceita)
            snapshot = empty_day(dia, config=config, hoje=hoje)
            body["erro"] = MSG_FALHA_LEITURA

        body.update({
            "data": dia.isoformat(),
            "data_indisponivel": snapshot.is_date_fully_booked(),
            "ocupados": sorted(snapshot.ocupados),
            "horarios": snapshot.slots(service_id),
        })
        return Response(body)


class DiasView(APIView):
    """
    GET ?year=YYYY&month=MM[&selected=YYYY-MM-DD]
      -> { "dias": [{"dia": 1, "disponivel": false}, ...] }

    Só o dia `selected` é carregado do banco; os demais dias abertos e
    futuros aparecem como disponíveis.
    """

    def get(self, request, *args, **kwargs):
        year = _safe_int(request.query_params.get("year"))
        month = _safe_int(request.query_params.get("month"))
        if year is None or not MINYEAR <= year <= MAXYEAR or not month or not 1 <= month <= 12:
            return _erro("year e month são requeridos", status.HTTP_400_BAD_REQUEST)

        config = agenda_config_from_settings()
        hoje = timezone.localdate()
        selecionada = parse_date(request.query_params.get("selected"))

        snapshot = None
        if selecionada and selecionada.year == year and selecionada.month == month:
            try:
                snapshot = load_day(selecionada, config=config, hoje=hoje)
            except StoreUnavailable:
                snapshot = None

        _, last_day = monthrange(year, month)
        dias = []
        for d in range(1, last_day + 1):
            dt = date(year, month, d)
            if snapshot is not None:
                indisponivel = snapshot.is_date_fully_booked(dt)
            else:
                indisponivel = is_closed_or_past(dt, hoje, config)
            dias.append({"dia": d, "disponivel": not indisponivel})
        return Response({"dias": dias})


# ===================== PIX =====================

class PixView(APIView):
    """GET ?service_id=<id> -> { "codigo": "<copia e cola>", "valor": "70.00" }"""

    def get(self, request, *args, **kwargs):
        service_id = _safe_int(request.query_params.get("service_id"))
        servico = Servico.objects.filter(pk=service_id, ativo=True).first() if service_id else None
        if not servico:
            return _erro("Serviço inválido ou inativo", status.HTTP_400_BAD_REQUEST)

        cfg = ConfiguracaoSite.carregar()
        if not cfg.pix_disponivel:
            return _erro(MSG_PIX_AUSENTE, status.HTTP_400_BAD_REQUEST)

        codigo = gerar_payload_pix(
            chave=cfg.pix_chave.strip(),
            valor=servico.preco,
            recebedor=cfg.recebedor_pix,
            cidade=cfg.cidade_pix,
        )
        return Response({"codigo": codigo, "valor": f"{servico.preco:.2f}"})


# ===================== Intake =====================

class AgendamentoCreateView(APIView):
    """
    Cria um agendamento PENDENTE.
    - Revalida o horário contra as reservas recém-lidas antes de gravar.
    - 409 se o horário foi tomado nesse meio-tempo (cliente escolhe outro).
    - Responde com o link do WhatsApp já montado para o número do salão.
    """

    def post(self, request, *args, **kwargs):
        config = agenda_config_from_settings()
        agora = timezone.localtime()
        ser = AgendamentoIntakeSerializer(
            data=request.data,
            context={"config": config, "hoje": agora.date(), "agora": agora.time()},
        )
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        pagamento = StatusPagamento.PAGO if data.get("pago_via_pix") else StatusPagamento.PENDENTE

        try:
            site = ConfiguracaoSite.carregar()
            resultado = create_booking_if_available(
                servico=data["servico"],
                cliente_nome=data["cliente_nome"],
                cliente_telefone=data["cliente_telefone"],
                dia=data["data"],
                hora=data["hora"],
                status_pagamento=pagamento,
                observacoes=data.get("observacoes"),
                config=config,
            )
        except (StoreUnavailable, DatabaseError):
            log.exception("[agendamentos] intake falhou")
            return _erro(MSG_FALHA_GRAVACAO, status.HTTP_503_SERVICE_UNAVAILABLE)

        if not resultado.ok:
            return _erro(MSG_CONFLITO, status.HTTP_409_CONFLICT)

        ag = resultado.agendamento
        disparar_webhook_agendamento(ag)

        return Response(
            {
                "ok": True,
                "message": "Agendamento realizado! Você será redirecionado para o WhatsApp.",
                "agendamento": AgendamentoPublicoSerializer(ag).data,
                "whatsapp_url": link_whatsapp(ag, site.telefone),
            },
            status=status.HTTP_201_CREATED,
        )
