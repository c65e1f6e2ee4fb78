# core/contract.py
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from .errors import InvalidConsumption, UnknownModality

E = TypeVar("E", bound=Enum)


# ==========================================================
# Enums
# ==========================================================
class PhaseType(str, Enum):
    SINGLE = "single"
    SPLIT = "split"
    THREE_PHASE = "three-phase"


class ScenarioName(str, Enum):
    CONSERVATIVE = "Conservative"
    REALISTIC = "Realistic"
    OPTIMISTIC = "Optimistic"


class PaymentModality(str, Enum):
    CASH = "cash"
    FINANCED = "financed"
    SUBSCRIPTION = "subscription"
    SHARED_GENERATION = "shared-generation"


class SystemType(str, Enum):
    MICRO_GENERATION = "micro-generation"
    MINI_GENERATION = "mini-generation"


class RegulatoryModality(str, Enum):
    LOCAL_CONSUMPTION = "local-consumption"
    REMOTE_SELF_CONSUMPTION = "remote-self-consumption"
    SHARED_GENERATION = "shared-generation"
    MULTIPLE_UNITS = "multiple-units"


def coerce_enum(enum_cls: Type[E], value: Any, error: Type[UnknownModality] = UnknownModality) -> E:
    """Acepta el miembro del enum o su valor string plano; `error` es la subclase a lanzar."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value))
    except ValueError as e:
        valid = ", ".join(m.value for m in enum_cls)
        raise error(f"{enum_cls.__name__}: {value!r} no es válido (se espera uno de: {valid})") from e


# ==========================================================
# Entrada
# ==========================================================
@dataclass(frozen=True)
class ConsumptionInput:
    postal_code: str
    monthly_consumption_kwh: float
    phase: PhaseType = PhaseType.SINGLE
    tariff_rate: Optional[float] = None  # R$/kWh; None -> tarifa nacional por defecto


def _positive_finite(x: Any) -> bool:
    if isinstance(x, bool):
        return False
    try:
        v = float(x)
    except (TypeError, ValueError):
        return False
    return math.isfinite(v) and v > 0


def validate_consumption(c: ConsumptionInput) -> None:
    if not _positive_finite(c.monthly_consumption_kwh):
        raise InvalidConsumption(
            f"monthly_consumption_kwh debe ser > 0 y finito. Valor={c.monthly_consumption_kwh!r}"
        )
    if c.tariff_rate is not None and not _positive_finite(c.tariff_rate):
        raise InvalidConsumption(f"tariff_rate debe ser > 0 y finito. Valor={c.tariff_rate!r}")
    try:
        coerce_enum(PhaseType, c.phase)
    except UnknownModality as e:
        raise InvalidConsumption(f"phase: {c.phase!r} no es un tipo de fase soportado") from e


# ==========================================================
# Dimensionado / finanzas
# ==========================================================
@dataclass(frozen=True)
class SystemSizing:
    power_kwp: float
    performance_ratio: float
    monthly_generation_kwh: float
    module_count: int
    area_m2: float


@dataclass(frozen=True)
class FinancialAnalysis:
    system_cost: float
    annual_savings: float
    payback_years: float
    roi_pct: float
    lifetime_savings: float
    monthly_savings: float
    yearly_savings: Tuple[float, ...] = ()  # año 1..N, para auditoría


@dataclass(frozen=True)
class Scenario:
    name: str  # valor de ScenarioName en los presets por defecto
    performance_ratio: float
    sizing: SystemSizing
    analysis: FinancialAnalysis

    @property
    def is_recommended(self) -> bool:
        # convención de negocio: la UI recomienda el caso realista
        return self.name == ScenarioName.REALISTIC


# ==========================================================
# Financiamiento
# ==========================================================
@dataclass(frozen=True)
class FinancingOption:
    modality: PaymentModality
    total_value: Optional[float] = None
    down_payment: Optional[float] = None
    installment_count: Optional[int] = None
    installment_value: Optional[float] = None
    annual_rate: Optional[float] = None
    monthly_rate: Optional[float] = None
    monthly_fee: Optional[float] = None
    monthly_savings: Optional[float] = None

    @property
    def monthly_payment(self) -> Optional[float]:
        """Lo que el cliente paga por mes en esta modalidad (None si es al contado)."""
        if self.modality == PaymentModality.FINANCED:
            return self.installment_value
        return self.monthly_fee


# ==========================================================
# Regulatorio
# ==========================================================
@dataclass(frozen=True)
class RegulatoryClassification:
    system_type: SystemType
    modality: RegulatoryModality
    credit_validity: str
    notes: Tuple[str, ...]


def _plain(v: Any) -> Any:
    if isinstance(v, Enum):
        return v.value
    if isinstance(v, dict):
        return {k: _plain(x) for k, x in v.items()}
    if isinstance(v, (list, tuple)):
        return [_plain(x) for x in v]
    return v


def to_dict(obj: Any) -> Dict[str, Any]:
    """Dict plano (enums aplanados) para la capa de presentación."""
    return _plain(asdict(obj))
