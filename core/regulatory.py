# core/regulatory.py
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Tuple

from .config import DEFAULT_CONFIG, SolarConfig
from .contract import RegulatoryClassification, RegulatoryModality, SystemType, coerce_enum
from .errors import InvalidPowerRating, UnknownRegulatoryModality

logger = logging.getLogger(__name__)


# ==========================================================
# Notas Ley 14.300/2022 (pt-BR, se muestran al cliente)
# ==========================================================
_BASE_NOTE_TEMPLATES: Tuple[str, ...] = (
    "Sistemas conectados à rede até 12/01/2023 mantêm isenção de tarifas.",
    "Novos sistemas têm cobrança gradual de TUSD Fio B (até 90% em 2029).",
    "Créditos energéticos têm validade de {months} meses.",
    "Sistema de compensação de energia elétrica regulamentado pela ANEEL.",
)


def base_notes(cfg: SolarConfig = DEFAULT_CONFIG) -> Tuple[str, ...]:
    return tuple(t.format(months=int(cfg.credit_validity_months)) for t in _BASE_NOTE_TEMPLATES)


BASE_NOTES: Tuple[str, ...] = base_notes(DEFAULT_CONFIG)

MODALITY_NOTES: Dict[RegulatoryModality, Tuple[str, ...]] = {
    RegulatoryModality.SHARED_GENERATION: (
        "Geração compartilhada permite compartilhar créditos entre múltiplas unidades consumidoras.",
        "Unidades devem estar na mesma área de concessão.",
    ),
    RegulatoryModality.REMOTE_SELF_CONSUMPTION: (
        "Autoconsumo remoto permite usar créditos em local diferente da geração.",
        "Unidades devem pertencer ao mesmo CPF/CNPJ.",
    ),
}

_SYSTEM_TYPE_LABELS = {
    SystemType.MICRO_GENERATION: "Microgeração Distribuída (até 75 kWp)",
    SystemType.MINI_GENERATION: "Minigeração Distribuída (de 75 kWp até 5 MW)",
}

_MODALITY_LABELS = {
    RegulatoryModality.LOCAL_CONSUMPTION: "Consumo Local (Autoconsumo)",
    RegulatoryModality.REMOTE_SELF_CONSUMPTION: "Autoconsumo Remoto",
    RegulatoryModality.SHARED_GENERATION: "Geração Compartilhada",
    RegulatoryModality.MULTIPLE_UNITS: "Múltiplas Unidades Consumidoras",
}


def _power(x: Any) -> float:
    if isinstance(x, bool):
        raise InvalidPowerRating(f"power_kwp debe ser numérico. Valor={x!r}")
    try:
        v = float(x)
    except (TypeError, ValueError) as e:
        raise InvalidPowerRating(f"power_kwp debe ser numérico. Valor={x!r}") from e
    if not math.isfinite(v) or v < 0:
        raise InvalidPowerRating(f"power_kwp debe ser >= 0 y finito. Valor={x!r}")
    return v


def system_type_for(power_kwp: float, cfg: SolarConfig = DEFAULT_CONFIG) -> SystemType:
    # inclusivo del lado micro: 75.00 kWp sigue siendo microgeneración
    if _power(power_kwp) <= float(cfg.micro_generation_limit_kwp):
        return SystemType.MICRO_GENERATION
    return SystemType.MINI_GENERATION


def classify(
    power_kwp: float,
    modality: Any = RegulatoryModality.LOCAL_CONSUMPTION,
    config: SolarConfig = DEFAULT_CONFIG,
) -> RegulatoryClassification:
    mod = coerce_enum(RegulatoryModality, modality, UnknownRegulatoryModality)
    stype = system_type_for(power_kwp, config)

    notes: List[str] = list(base_notes(config))
    notes.extend(MODALITY_NOTES.get(mod, ()))

    out = RegulatoryClassification(
        system_type=stype,
        modality=mod,
        credit_validity=f"{int(config.credit_validity_months)} months",
        notes=tuple(notes),
    )
    logger.debug("classify kwp=%s modality=%s -> %s (%d notes)", power_kwp, mod.value, stype.value, len(notes))
    return out


def system_type_label(c: RegulatoryClassification) -> str:
    return _SYSTEM_TYPE_LABELS[c.system_type]


def modality_label(c: RegulatoryClassification) -> str:
    return _MODALITY_LABELS[c.modality]
