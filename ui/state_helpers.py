# ui/state_helpers.py
from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


# Solo INPUTS de los que dependen los escenarios. Nunca resultados.
_FINGERPRINT_KEYS = ("consumption",)


# ==========================================================
# Contexto de sesión
# ==========================================================
@dataclass
class AdvisorCtx:
    consumption: Dict[str, Any] = field(
        default_factory=lambda: {
            "postal_code": "",
            "monthly_kwh": 350.0,
            "phase": "single",
            "tariff_rate": None,
        }
    )
    financing: Dict[str, Any] = field(
        default_factory=lambda: {
            "modality": "cash",
            "down_payment": None,
            "installments": 60,
        }
    )
    regulatory: Dict[str, Any] = field(default_factory=lambda: {"modality": "local-consumption"})

    errors: List[str] = field(default_factory=list)

    # resultados (no entran al fingerprint)
    scenarios: Optional[List[Any]] = None
    result_inputs_fingerprint: Optional[str] = None


_FORM_KEYS = ("consumption", "financing", "regulatory")


def ctx_get(session_state: Any) -> AdvisorCtx:
    if "advisor_ctx" not in session_state:
        session_state["advisor_ctx"] = AdvisorCtx()
    ctx = session_state["advisor_ctx"]

    # sesiones creadas por un formulario viejo pueden no tener todas las claves
    fresh = AdvisorCtx()
    for key in _FORM_KEYS:
        merge_defaults(ensure_dict(ctx, key), getattr(fresh, key))
    return ctx


def ensure_dict(ctx: Any, key: str, default_factory: Callable[[], Dict[str, Any]] | None = None) -> Dict[str, Any]:
    if default_factory is None:
        default_factory = dict

    cur = getattr(ctx, key, None)
    if not isinstance(cur, dict):
        cur = default_factory() or {}
        setattr(ctx, key, cur)
    return cur


def merge_defaults(dst: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
    for k, v in (defaults or {}).items():
        dst.setdefault(k, v)
    return dst


# ==========================================================
# Detección de resultados desactualizados
# ==========================================================
def _norm_value(x: Any) -> Any:
    if isinstance(x, dict):
        return {str(k): _norm_value(v) for k, v in sorted(x.items(), key=lambda kv: str(kv[0]))}
    if isinstance(x, (list, tuple)):
        return [_norm_value(v) for v in x]
    if isinstance(x, (str, int, float, bool)) or x is None:
        return x
    return str(x)


def build_inputs_fingerprint(ctx: Any) -> str:
    payload = {k: _norm_value(getattr(ctx, k, None)) for k in _FINGERPRINT_KEYS}
    raw = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def save_result_fingerprint(ctx: Any) -> str:
    fp = build_inputs_fingerprint(ctx)
    setattr(ctx, "result_inputs_fingerprint", fp)
    return fp


def is_result_stale(ctx: Any) -> bool:
    saved = getattr(ctx, "result_inputs_fingerprint", None)
    if not saved:
        return False
    return str(saved) != build_inputs_fingerprint(ctx)
