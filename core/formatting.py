# core/formatting.py
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from .config import DEFAULT_CONFIG, SolarConfig
from .errors import InvalidConfiguration

# locale -> (separador decimal, separador de miles)
_SEPARATORS = {
    "pt_BR": (",", "."),
    "es_ES": (",", "."),
    "es_HN": (".", ","),
    "en_US": (".", ","),
}

_SYMBOLS = {
    "BRL": "R$",
    "USD": "US$",
    "EUR": "€",
    "HNL": "L",
}


def round_half_up(value: float, places: int = 2) -> float:
    """
    Redondea la mitad alejándose de cero sobre la representación decimal
    de `value` (2.675 -> 2.68; round() normal da 2.67).
    """
    v = float(value)
    if not math.isfinite(v):
        return v
    d = Decimal(repr(v))
    q = Decimal(1).scaleb(-int(places))
    with localcontext() as ctx:
        # el contexto por defecto (28 dígitos) no alcanza para montos >= 1e26
        ctx.prec = max(ctx.prec, d.adjusted() + int(places) + 2)
        return float(d.quantize(q, rounding=ROUND_HALF_UP))


def _separators(locale: str) -> tuple:
    try:
        return _SEPARATORS[locale]
    except KeyError as e:
        raise InvalidConfiguration(f"Locale no soportado: {locale!r}") from e


def _group(value: float, places: int, locale: str) -> str:
    dec_sep, thou_sep = _separators(locale)
    txt = f"{abs(round_half_up(value, places)):,.{places}f}"
    # python da "1,234.56"; se cambian a los separadores del locale
    txt = txt.replace(",", "\0").replace(".", dec_sep).replace("\0", thou_sep)
    return txt


def format_number(value: float, places: Optional[int] = None, cfg: SolarConfig = DEFAULT_CONFIG) -> str:
    nd = cfg.decimal_places if places is None else int(places)
    txt = _group(value, nd, cfg.currency_locale)
    return f"-{txt}" if round_half_up(value, nd) < 0 else txt


def format_currency(value: float, cfg: SolarConfig = DEFAULT_CONFIG) -> str:
    try:
        symbol = _SYMBOLS[cfg.currency_code]
    except KeyError as e:
        raise InvalidConfiguration(f"Moneda no soportada: {cfg.currency_code!r}") from e

    txt = f"{symbol} {_group(value, 2, cfg.currency_locale)}"
    return f"-{txt}" if round_half_up(value, 2) < 0 else txt
