# core/contacts.py
from __future__ import annotations
import re
from typing import Optional
from urllib.parse import quote

_NON_DIGITS = re.compile(r"\D+")

WHATSAPP_BASE_URL = "https://wa.me/"


def only_digits(raw: Optional[str]) -> str:
    return _NON_DIGITS.sub("", raw or "")


def normalize_msisdn_br(raw: Optional[str]) -> Optional[str]:
    """
    Normaliza telefones do Brasil para E.164 (sem +):
    - Mantém DDI 55.
    - Remove '00' inicial, zeros à esquerda após 55.
    - Aceita entradas com/sem DDI; devolve 55 + DDD + número (12 ou 13 dígitos).
    Retorna None se inválido.
    """
    if not raw:
        return None
    digits = only_digits(raw)

    # remove prefixo discado internacional "00"
    if digits.startswith("00"):
        digits = digits[2:]

    # se veio sem 55 e parece DDD+numero (10 ou 11), prefixa 55
    if not digits.startswith("55") and len(digits) in (10, 11):
        digits = "55" + digits

    # casos "550..." (DDI 55 + zero extra do tronco): 550X... -> 55X...
    if digits.startswith("550"):
        digits = "55" + digits[3:]

    # remover zeros à esquerda APÓS o 55 (nunca remova o 55)
    if digits.startswith("55"):
        digits = "55" + digits[2:].lstrip("0")

    # validar tamanho final BR: 55 + DDD(2) + número(8 ou 9) => 12 ou 13 dígitos
    if not (digits.startswith("55") and len(digits) in (12, 13)):
        return None

    return digits


def normalize_phone(raw: Optional[str]) -> str:
    """
    Wrapper: retorna string normalizada ou "" se inválido.
    """
    return normalize_msisdn_br(raw) or ""


def whatsapp_link(numero: Optional[str], mensagem: str) -> str:
    """
    Monta o deep link do WhatsApp (wa.me) com a mensagem já codificada.
    Número vazio gera link sem destinatário (o app pergunta o contato).
    """
    digits = only_digits(numero)
    return f"{WHATSAPP_BASE_URL}{digits}?text={quote(mensagem, safe='')}"
