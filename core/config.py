# core/config.py
from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import InvalidConfiguration

BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = BASE_DIR / "config"
BRASIL_CONFIG = CONFIG_DIR / "brasil.yaml"

# Defaults nacionales de Brasil
DEFAULT_PRESETS: Tuple[Tuple[str, float], ...] = (
    ("Conservative", 1.14),
    ("Realistic", 1.30),
    ("Optimistic", 1.45),
)


@dataclass(frozen=True)
class SolarConfig:
    # irradiación / módulos
    irradiance_kwh_m2_day: float = 5.0
    days_per_month: float = 30.0
    module_power_w: float = 550.0
    module_area_m2: float = 2.6

    # análisis financiero
    lifetime_years: int = 25
    annual_degradation: float = 0.005
    default_tariff: float = 0.89
    default_cost_per_kwp: float = 4500.0

    # financiamiento
    financing_annual_rate: float = 0.12
    default_down_payment_share: float = 0.20
    default_installments: int = 60
    subscription_share: float = 0.85
    shared_generation_share: float = 0.80

    # Ley 14.300/2022
    micro_generation_limit_kwp: float = 75.0
    credit_validity_months: int = 60

    scenario_presets: Tuple[Tuple[str, float], ...] = DEFAULT_PRESETS

    # formato
    currency_locale: str = "pt_BR"
    currency_code: str = "BRL"
    decimal_places: int = 2

    def __post_init__(self) -> None:
        _validate(self)


# ==========================================================
# Validación
# ==========================================================
_POSITIVE = (
    "irradiance_kwh_m2_day",
    "days_per_month",
    "module_power_w",
    "module_area_m2",
    "lifetime_years",
    "default_tariff",
    "default_cost_per_kwp",
    "default_installments",
    "micro_generation_limit_kwp",
    "credit_validity_months",
)

# (campo, mín, máx, mín_inclusivo, máx_inclusivo)
_RANGES = (
    ("annual_degradation", 0.0, 1.0, True, False),
    ("financing_annual_rate", 0.0, math.inf, True, False),
    ("default_down_payment_share", 0.0, 1.0, True, True),
    ("subscription_share", 0.0, 1.0, False, True),
    ("shared_generation_share", 0.0, 1.0, False, True),
)

_INTEGERS = ("lifetime_years", "default_installments", "credit_validity_months", "decimal_places")


def _num(cfg: SolarConfig, name: str) -> float:
    v = getattr(cfg, name)
    if isinstance(v, bool):
        raise InvalidConfiguration(f"'{name}' debe ser numérico. Valor={v!r}")
    try:
        x = float(v)
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"'{name}' debe ser numérico. Valor={v!r}") from e
    if not math.isfinite(x):
        raise InvalidConfiguration(f"'{name}' debe ser finito. Valor={v!r}")
    return x


def _in_range(x: float, lo: float, hi: float, lo_inc: bool, hi_inc: bool) -> bool:
    ok_lo = x >= lo if lo_inc else x > lo
    ok_hi = x <= hi if hi_inc else x < hi
    return ok_lo and ok_hi


def _validate(cfg: SolarConfig) -> None:
    for name in _POSITIVE:
        if _num(cfg, name) <= 0:
            raise InvalidConfiguration(f"'{name}' debe ser > 0. Valor={getattr(cfg, name)!r}")

    for name, lo, hi, lo_inc, hi_inc in _RANGES:
        x = _num(cfg, name)
        if not _in_range(x, lo, hi, lo_inc, hi_inc):
            raise InvalidConfiguration(f"'{name}' fuera de rango. Valor={x!r}")

    for name in _INTEGERS:
        v = getattr(cfg, name)
        if not isinstance(v, int) or isinstance(v, bool):
            raise InvalidConfiguration(f"'{name}' debe ser entero. Valor={v!r}")
    if cfg.decimal_places < 0:
        raise InvalidConfiguration(f"'decimal_places' debe ser >= 0. Valor={cfg.decimal_places!r}")

    if not cfg.scenario_presets:
        raise InvalidConfiguration("scenario_presets no puede estar vacío")
    for preset in cfg.scenario_presets:
        if not isinstance(preset, (tuple, list)) or len(preset) != 2:
            raise InvalidConfiguration(f"Preset inválido (se espera name, pr): {preset!r}")
        name, pr = preset
        if not str(name).strip():
            raise InvalidConfiguration(f"Preset sin nombre: {preset!r}")
        if isinstance(pr, bool) or not isinstance(pr, (int, float)) or not math.isfinite(pr) or pr <= 0:
            raise InvalidConfiguration(f"Preset '{name}': PR debe ser > 0. Valor={pr!r}")

    if not str(cfg.currency_locale).strip() or not str(cfg.currency_code).strip():
        raise InvalidConfiguration("currency_locale y currency_code son obligatorios")


DEFAULT_CONFIG = SolarConfig()


# ==========================================================
# YAML + overrides
# ==========================================================
def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise InvalidConfiguration(f"No se encontró el archivo de configuración: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Configuración inválida (debe ser un mapping): {path}")
    return data


def _normalize(overrides: Dict[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(SolarConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise InvalidConfiguration(f"Claves de configuración desconocidas: {', '.join(unknown)}")

    out = dict(overrides)
    presets = out.get("scenario_presets")
    if presets is not None:
        # el YAML trae [{name: .., pr: ..}] o [[name, pr]]
        norm = []
        for p in presets:
            if isinstance(p, dict):
                norm.append((p.get("name"), p.get("pr")))
            elif isinstance(p, (list, tuple)):
                norm.append(tuple(p))
            else:
                raise InvalidConfiguration(f"Entrada de preset inválida: {p!r}")
        out["scenario_presets"] = tuple(norm)
    return out


def with_overrides(cfg: SolarConfig, overrides: Optional[Dict[str, Any]]) -> SolarConfig:
    if not overrides:
        return cfg
    return replace(cfg, **_normalize(overrides))


def load_config(path: Optional[Path | str] = None, overrides: Optional[Dict[str, Any]] = None) -> SolarConfig:
    """
    Config efectiva:
      defaults <- archivo YAML (si hay) <- overrides explícitos
    """
    cfg = DEFAULT_CONFIG
    if path is not None:
        cfg = with_overrides(cfg, _read_yaml(Path(path)))
    return with_overrides(cfg, overrides)
