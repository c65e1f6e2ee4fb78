# core/financing.py
from __future__ import annotations

import logging
import math
from typing import Any, List, Optional

from .config import DEFAULT_CONFIG, SolarConfig
from .contract import FinancingOption, PaymentModality, coerce_enum
from .errors import InvalidFinancingParameters, UnknownPaymentModality
from .formatting import round_half_up

logger = logging.getLogger(__name__)


# ==========================================================
# Amortización
# ==========================================================
def monthly_rate_from_annual(annual_rate: float) -> float:
    """Tasa mensual efectiva equivalente a una tasa anual compuesta."""
    return (1.0 + float(annual_rate)) ** (1.0 / 12.0) - 1.0


def annuity_installment(principal: float, monthly_rate: float, n: int) -> float:
    n = int(n)
    if n < 1:
        raise InvalidFinancingParameters(f"installments debe ser >= 1. Valor={n!r}")
    r = float(monthly_rate)
    if r == 0:
        return float(principal) / n
    try:
        f = (1.0 + r) ** n
    except OverflowError as e:
        raise InvalidFinancingParameters(f"installments fuera de rango para la tasa dada. Valor={n!r}") from e
    return float(principal) * r / (1.0 - 1.0 / f)


# ==========================================================
# Chequeo de parámetros
# ==========================================================
def _money(name: str, x: Any) -> float:
    if isinstance(x, bool):
        raise InvalidFinancingParameters(f"'{name}' debe ser numérico. Valor={x!r}")
    try:
        v = float(x)
    except (TypeError, ValueError) as e:
        raise InvalidFinancingParameters(f"'{name}' debe ser numérico. Valor={x!r}") from e
    if not math.isfinite(v) or v < 0:
        raise InvalidFinancingParameters(f"'{name}' debe ser >= 0 y finito. Valor={x!r}")
    return v


def _installments(x: Any) -> int:
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise InvalidFinancingParameters(f"installments debe ser entero. Valor={x!r}")
    if isinstance(x, float) and not (math.isfinite(x) and x.is_integer()):
        raise InvalidFinancingParameters(f"installments debe ser entero. Valor={x!r}")
    n = int(x)
    if n < 1:
        raise InvalidFinancingParameters(f"installments debe ser >= 1. Valor={x!r}")
    return n


# ==========================================================
# Modalidades
# ==========================================================
def _cash(cost: float, monthly_savings: float) -> FinancingOption:
    return FinancingOption(
        modality=PaymentModality.CASH,
        total_value=round_half_up(cost),
        monthly_savings=round_half_up(monthly_savings),
    )


def _financed(
    cost: float,
    monthly_savings: float,
    down_payment: Optional[float],
    installments: Optional[int],
    annual_rate: Optional[float],
    cfg: SolarConfig,
) -> FinancingOption:
    down = cost * float(cfg.default_down_payment_share) if down_payment is None else _money("down_payment", down_payment)
    n = _installments(cfg.default_installments if installments is None else installments)
    rate = _money("annual_rate", cfg.financing_annual_rate if annual_rate is None else annual_rate)

    if down > cost:
        raise InvalidFinancingParameters(f"down_payment ({down:.2f}) supera el costo del sistema ({cost:.2f})")

    r = monthly_rate_from_annual(rate)
    installment = round_half_up(annuity_installment(cost - down, r, n))
    down = round_half_up(down)
    # total con las cifras redondeadas que el cliente realmente paga
    total = down + installment * n

    return FinancingOption(
        modality=PaymentModality.FINANCED,
        total_value=round_half_up(total),
        down_payment=down,
        installment_count=n,
        installment_value=installment,
        annual_rate=rate,
        monthly_rate=round_half_up(r, 6),
        monthly_savings=round_half_up(monthly_savings),
    )


def _fee(modality: PaymentModality, monthly_savings: float, share: float) -> FinancingOption:
    return FinancingOption(
        modality=modality,
        monthly_fee=round_half_up(monthly_savings * float(share)),
        monthly_savings=round_half_up(monthly_savings),
    )


# ==========================================================
# Puntos de entrada
# ==========================================================
def quote(
    system_cost: float,
    annual_savings: float,
    modality: Any,
    down_payment: Optional[float] = None,
    installments: Optional[int] = None,
    annual_rate: Optional[float] = None,
    config: SolarConfig = DEFAULT_CONFIG,
) -> FinancingOption:
    """
    Cotiza una modalidad de pago.

    financed: cuota fija sobre `installments` meses a la tasa mensual
    equivalente a `annual_rate` (12% a.a. por defecto); con tasa cero se
    divide en partes iguales. Defaults: 20% de entrada, 60 cuotas.
    subscription / shared-generation: mensualidad como fracción (85% / 80%)
    del ahorro mensual promedio del cliente.
    """
    mod = coerce_enum(PaymentModality, modality, UnknownPaymentModality)
    cost = _money("system_cost", system_cost)
    monthly_savings = _money("annual_savings", annual_savings) / 12.0

    if mod == PaymentModality.CASH:
        opt = _cash(cost, monthly_savings)
    elif mod == PaymentModality.FINANCED:
        opt = _financed(cost, monthly_savings, down_payment, installments, annual_rate, config)
    elif mod == PaymentModality.SUBSCRIPTION:
        opt = _fee(mod, monthly_savings, config.subscription_share)
    else:
        opt = _fee(mod, monthly_savings, config.shared_generation_share)

    logger.debug("quote %s cost=%.2f -> %s", mod.value, cost, opt)
    return opt


def quote_all(
    system_cost: float,
    annual_savings: float,
    down_payment: Optional[float] = None,
    installments: Optional[int] = None,
    annual_rate: Optional[float] = None,
    config: SolarConfig = DEFAULT_CONFIG,
) -> List[FinancingOption]:
    return [
        quote(system_cost, annual_savings, m, down_payment, installments, annual_rate, config)
        for m in PaymentModality
    ]
