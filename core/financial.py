# core/financial.py
from __future__ import annotations

import logging
import math
from typing import List, Optional

from .config import DEFAULT_CONFIG, SolarConfig
from .contract import FinancialAnalysis, SystemSizing
from .errors import InvalidFinancialInput, UndefinedPayback, UndefinedROI
from .formatting import round_half_up

logger = logging.getLogger(__name__)


# ==========================================================
# Matemática base
# ==========================================================
def _non_negative(name: str, x: float) -> float:
    if isinstance(x, bool):
        raise InvalidFinancialInput(f"'{name}' debe ser numérico. Valor={x!r}")
    try:
        v = float(x)
    except (TypeError, ValueError) as e:
        raise InvalidFinancialInput(f"'{name}' debe ser numérico. Valor={x!r}") from e
    if not math.isfinite(v) or v < 0:
        raise InvalidFinancialInput(f"'{name}' debe ser >= 0 y finito. Valor={x!r}")
    return v


def degradation_factor(year: int, degradation: float) -> float:
    return (1.0 - float(degradation)) ** (int(year) - 1)


def yearly_savings_table(annual_savings: float, cfg: SolarConfig = DEFAULT_CONFIG) -> List[float]:
    """
    Ahorro de cada año 1..vida útil, degradado desde la base del año 1:
    anual * (1 - d)^(año - 1). Sin redondear.
    """
    out: List[float] = []
    for year in range(1, int(cfg.lifetime_years) + 1):
        out.append(float(annual_savings) * degradation_factor(year, cfg.annual_degradation))
    return out


def payback_years(system_cost: float, annual_savings: float) -> float:
    if annual_savings == 0:
        raise UndefinedPayback("Ahorro anual cero: payback indefinido")
    return float(system_cost) / float(annual_savings)


def roi_pct(system_cost: float, annual_savings: float, lifetime_years: int) -> float:
    if system_cost == 0:
        raise UndefinedROI("Costo del sistema cero: ROI indefinido")
    return (float(annual_savings) * int(lifetime_years) - float(system_cost)) / float(system_cost) * 100.0


# ==========================================================
# Punto de entrada
# ==========================================================
def analyze(
    sizing: SystemSizing,
    cost_per_kwp: Optional[float] = None,
    tariff_rate: Optional[float] = None,
    config: SolarConfig = DEFAULT_CONFIG,
) -> FinancialAnalysis:
    cost_kwp = _non_negative("cost_per_kwp", config.default_cost_per_kwp if cost_per_kwp is None else cost_per_kwp)
    tariff = _non_negative("tariff_rate", config.default_tariff if tariff_rate is None else tariff_rate)

    system_cost = float(sizing.power_kwp) * cost_kwp
    monthly_savings = float(sizing.monthly_generation_kwh) * tariff
    annual_savings = monthly_savings * 12.0
    if not (math.isfinite(system_cost) and math.isfinite(annual_savings)):
        raise InvalidFinancialInput(
            f"Costo o ahorro fuera de rango. cost_per_kwp={cost_kwp!r} tariff_rate={tariff!r}"
        )

    payback = payback_years(system_cost, annual_savings)
    roi = roi_pct(system_cost, annual_savings, config.lifetime_years)

    table = yearly_savings_table(annual_savings, config)
    lifetime = 0.0
    for v in table:
        lifetime += v

    analysis = FinancialAnalysis(
        system_cost=round_half_up(system_cost),
        annual_savings=round_half_up(annual_savings),
        payback_years=round_half_up(payback),
        roi_pct=round_half_up(roi),
        lifetime_savings=round_half_up(lifetime),
        monthly_savings=round_half_up(monthly_savings),
        yearly_savings=tuple(round_half_up(v) for v in table),
    )
    logger.debug(
        "analysis kwp=%.2f cost=%.2f annual=%.2f payback=%.2f roi=%.2f",
        sizing.power_kwp, analysis.system_cost, analysis.annual_savings, analysis.payback_years, analysis.roi_pct,
    )
    return analysis
