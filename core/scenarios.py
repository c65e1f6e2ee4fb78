# core/scenarios.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_CONFIG, SolarConfig
from .contract import ConsumptionInput, Scenario, ScenarioName, validate_consumption
from .financial import analyze
from .sizing import size

logger = logging.getLogger(__name__)


def effective_tariff(consumption: ConsumptionInput, cfg: SolarConfig = DEFAULT_CONFIG) -> float:
    return float(consumption.tariff_rate) if consumption.tariff_rate is not None else float(cfg.default_tariff)


def generate_scenarios(
    consumption: ConsumptionInput,
    cost_per_kwp: Optional[float] = None,
    config: SolarConfig = DEFAULT_CONFIG,
) -> List[Scenario]:
    """
    Un escenario por preset de PR configurado, en el orden de los presets
    (Conservative, Realistic, Optimistic por defecto). No se reordena.
    """
    validate_consumption(consumption)
    tariff = effective_tariff(consumption, config)

    out: List[Scenario] = []
    for name, pr in config.scenario_presets:
        sizing = size(consumption, pr, config)
        analysis = analyze(sizing, cost_per_kwp, tariff, config)
        out.append(Scenario(name=str(name), performance_ratio=float(pr), sizing=sizing, analysis=analysis))

    logger.debug("scenarios=%s", [(s.name, s.sizing.power_kwp) for s in out])
    return out


def find_scenario(scenarios: Sequence[Scenario], name: str) -> Optional[Scenario]:
    for s in scenarios:
        if s.name == str(name):
            return s
    return None


def recommended_scenario(scenarios: Sequence[Scenario]) -> Optional[Scenario]:
    return find_scenario(scenarios, ScenarioName.REALISTIC.value)
