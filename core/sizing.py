# core/sizing.py
from __future__ import annotations

import logging
import math

from .config import DEFAULT_CONFIG, SolarConfig
from .contract import ConsumptionInput, SystemSizing, validate_consumption
from .errors import InvalidConsumption, InvalidPerformanceRatio
from .formatting import round_half_up

logger = logging.getLogger(__name__)

_CEIL_EPS = 1e-9


# ==========================================================
# Utilitarios
# ==========================================================
def _check_pr(pr: float) -> float:
    if isinstance(pr, bool):
        raise InvalidPerformanceRatio(f"PR debe ser numérico. Valor={pr!r}")
    try:
        v = float(pr)
    except (TypeError, ValueError) as e:
        raise InvalidPerformanceRatio(f"PR debe ser numérico. Valor={pr!r}") from e
    if not math.isfinite(v) or v <= 0:
        raise InvalidPerformanceRatio(f"PR debe ser > 0. Valor={pr!r}")
    return v


def daily_consumption_kwh(monthly_kwh: float, cfg: SolarConfig = DEFAULT_CONFIG) -> float:
    return float(monthly_kwh) / float(cfg.days_per_month)


def required_power_kwp(monthly_kwh: float, pr: float, cfg: SolarConfig = DEFAULT_CONFIG) -> float:
    """kWp sin redondear que genera exactamente `monthly_kwh` con el PR dado."""
    return daily_consumption_kwh(monthly_kwh, cfg) / (float(cfg.irradiance_kwh_m2_day) * float(pr))


def monthly_generation_kwh(power_kwp: float, pr: float, cfg: SolarConfig = DEFAULT_CONFIG) -> float:
    return float(power_kwp) * float(cfg.irradiance_kwh_m2_day) * float(pr) * float(cfg.days_per_month)


def module_count(power_kwp: float, cfg: SolarConfig = DEFAULT_CONFIG) -> int:
    n = (float(power_kwp) * 1000.0) / float(cfg.module_power_w)
    if not math.isfinite(n):
        raise InvalidConsumption(f"Consumo demasiado grande para dimensionar. kWp={power_kwp!r}")
    # 1.65 kWp / 550 W da 3.0000000000000004: son 3 módulos, no 4
    return int(math.ceil(n - _CEIL_EPS))


# ==========================================================
# Punto de entrada
# ==========================================================
def size(consumption: ConsumptionInput, performance_ratio: float, config: SolarConfig = DEFAULT_CONFIG) -> SystemSizing:
    """
    Dimensionado net-zero: el arreglo genera el 100% del consumo mensual
    declarado para el PR dado.

    Aquí PR es el multiplicador de eficiencia combinado del producto
    (1.14 / 1.30 / 1.45), así que valores mayores a 1 son normales.
    """
    validate_consumption(consumption)
    pr = _check_pr(performance_ratio)

    kwh = float(consumption.monthly_consumption_kwh)
    power = required_power_kwp(kwh, pr, config)
    generation = monthly_generation_kwh(power, pr, config)
    n = module_count(power, config)
    area = n * float(config.module_area_m2)

    sizing = SystemSizing(
        power_kwp=round_half_up(power),
        performance_ratio=pr,
        monthly_generation_kwh=round_half_up(generation),
        module_count=n,
        area_m2=round_half_up(area),
    )
    logger.debug(
        "sizing kwh=%.2f pr=%.2f -> kwp=%.2f modules=%d area=%.2f",
        kwh, pr, sizing.power_kwp, n, sizing.area_m2,
    )
    return sizing
