# ui/consumption_form.py
from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

import streamlit as st

from core.contract import ConsumptionInput, PhaseType

_PHASE_LABELS = {
    PhaseType.SINGLE.value: "Monofásico",
    PhaseType.SPLIT.value: "Bifásico",
    PhaseType.THREE_PHASE.value: "Trifásico",
}

_CEP_RE = re.compile(r"^\d{5}-?\d{3}$")


def parse_postal_code(raw: str) -> Optional[str]:
    """CEP como 00000-000, o None si no tiene 8 dígitos."""
    txt = (raw or "").strip()
    if not _CEP_RE.match(txt):
        return None
    digits = txt.replace("-", "")
    return f"{digits[:5]}-{digits[5:]}"


def render(ctx) -> None:
    st.markdown("### Seu consumo de energia")

    c = ctx.consumption

    col1, col2 = st.columns(2)
    with col1:
        c["postal_code"] = st.text_input("CEP", value=str(c.get("postal_code") or ""), placeholder="00000-000")
        phases = list(_PHASE_LABELS)
        c["phase"] = st.selectbox(
            "Tipo de fase",
            options=phases,
            index=phases.index(c.get("phase", PhaseType.SINGLE.value)),
            format_func=lambda p: _PHASE_LABELS[p],
        )
    with col2:
        c["monthly_kwh"] = st.number_input(
            "Consumo médio mensal (kWh)",
            min_value=0.0,
            step=10.0,
            value=float(c.get("monthly_kwh") or 0.0),
        )
        tariff = st.number_input(
            "Tarifa (R$/kWh, opcional)",
            min_value=0.0,
            step=0.01,
            value=float(c.get("tariff_rate") or 0.0),
            help="Deixe 0 para usar a tarifa média nacional.",
        )
        c["tariff_rate"] = tariff if tariff > 0 else None

    ctx.consumption = c


def validate(ctx) -> Tuple[bool, List[str]]:
    errors: List[str] = []
    c = ctx.consumption

    if parse_postal_code(str(c.get("postal_code") or "")) is None:
        errors.append("Informe um CEP válido (8 dígitos).")

    try:
        kwh = float(c.get("monthly_kwh"))
    except (TypeError, ValueError):
        errors.append("Consumo inválido: informe um valor numérico.")
        return False, errors

    if kwh <= 0:
        errors.append("O consumo médio mensal deve ser maior que 0 kWh.")

    if c.get("phase") not in _PHASE_LABELS:
        errors.append("Selecione o tipo de fase elétrica.")

    return (len(errors) == 0), errors


def to_input(ctx: Any) -> ConsumptionInput:
    c = ctx.consumption
    tariff = c.get("tariff_rate")
    return ConsumptionInput(
        postal_code=parse_postal_code(str(c.get("postal_code") or "")) or str(c.get("postal_code") or ""),
        monthly_consumption_kwh=float(c.get("monthly_kwh")),
        phase=PhaseType(c.get("phase", PhaseType.SINGLE.value)),
        tariff_rate=float(tariff) if tariff else None,
    )
