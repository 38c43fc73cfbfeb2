# core/pix.py
"""
PIX "copia e cola" (BR Code, padrão EMV-MPM) e validação de chave PIX.

O payload é só formatação + checksum: nenhum pagamento é liquidado aqui.
"""
from __future__ import annotations

import re
import time
import unicodedata
from decimal import Decimal
from typing import Optional

PIX_GUI = "BR.GOV.BCB.PIX"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"

MAX_NOME = 25
MAX_CIDADE = 15
MAX_TXID = 25

_PIX_CPF = re.compile(r"^\d{11}$")
_PIX_CNPJ = re.compile(r"^\d{14}$")
_PIX_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PIX_TELEFONE = re.compile(r"^\+55\d{10,11}$")
_PIX_ALEATORIA = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
_PIX_SEPARADORES = re.compile(r"[.\-/\s]")


def chave_pix_valida(valor: Optional[str]) -> bool:
    """CPF, CNPJ, e-mail, telefone (+55...) ou chave aleatória (UUID)."""
    if not valor:
        return False
    limpo = _PIX_SEPARADORES.sub("", valor)
    return bool(
        _PIX_CPF.match(limpo)
        or _PIX_CNPJ.match(limpo)
        or _PIX_EMAIL.match(valor)
        or _PIX_TELEFONE.match(limpo)
        or _PIX_ALEATORIA.match(valor)
    )


def _sem_acentos(texto: str) -> str:
    return "".join(
        ch for ch in unicodedata.normalize("NFD", texto) if not unicodedata.combining(ch)
    )


def _emv(campo: str, valor: str) -> str:
    return f"{campo}{len(valor):02d}{valor}"


def crc16_ccitt(payload: str) -> str:
    """CRC16-CCITT (poly 0x1021, init 0xFFFF), 4 dígitos hex maiúsculos."""
    crc = 0xFFFF
    for ch in payload:
        crc ^= ord(ch) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return f"{crc:04X}"


def gerar_payload_pix(
    chave: str,
    valor: Decimal | float | str,
    recebedor: str,
    cidade: str,
    txid: Optional[str] = None,
) -> str:
    """
    Gera o código "copia e cola".

    `txid` padrão: timestamp em milissegundos (até 25 caracteres).
    """
    nome = _sem_acentos(recebedor[:MAX_NOME].upper())
    cidade_fmt = _sem_acentos(cidade[:MAX_CIDADE].upper())
    txid = (txid or str(int(time.time() * 1000)))[-MAX_TXID:]
    valor_fmt = f"{Decimal(str(valor)):.2f}"

    conta = _emv("26", _emv("00", PIX_GUI) + _emv("01", chave))
    adicional = _emv("62", _emv("05", txid))

    payload = "".join([
        _emv("00", "01"),                       # Payload Format Indicator
        conta,                                  # Merchant Account Information
        _emv("52", MERCHANT_CATEGORY_CODE),
        _emv("53", CURRENCY_BRL),
        _emv("54", valor_fmt),
        _emv("58", COUNTRY_CODE),
        _emv("59", nome),
        _emv("60", cidade_fmt),
        adicional,
        "6304",                                 # CRC16 (valor vem a seguir)
    ])
    return payload + crc16_ccitt(payload)
