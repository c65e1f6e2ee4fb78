# ui/scenarios_view.py
from __future__ import annotations

from typing import Any, Dict, List, Sequence

import pandas as pd
import streamlit as st

from core.config import DEFAULT_CONFIG, SolarConfig
from core.contract import Scenario
from core.formatting import format_currency, format_number

_LABELS = {"Conservative": "Conservador", "Realistic": "Realista", "Optimistic": "Otimista"}


def scenario_label(s: Scenario) -> str:
    return _LABELS.get(s.name, s.name)


def scenario_rows(scenarios: Sequence[Scenario], cfg: SolarConfig = DEFAULT_CONFIG) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for s in scenarios:
        z, a = s.sizing, s.analysis
        rows.append({
            "Cenário": scenario_label(s),
            "PR": format_number(s.performance_ratio, 2, cfg),
            "Potência (kWp)": format_number(z.power_kwp, 2, cfg),
            "Módulos": z.module_count,
            "Área (m²)": format_number(z.area_m2, 2, cfg),
            "Geração (kWh/mês)": format_number(z.monthly_generation_kwh, 2, cfg),
            "Investimento": format_currency(a.system_cost, cfg),
            "Economia anual": format_currency(a.annual_savings, cfg),
            "Payback (anos)": format_number(a.payback_years, 2, cfg),
            "ROI (%)": format_number(a.roi_pct, 2, cfg),
            f"Economia {cfg.lifetime_years} anos": format_currency(a.lifetime_savings, cfg),
        })
    return rows


def render(scenarios: Sequence[Scenario], cfg: SolarConfig = DEFAULT_CONFIG) -> None:
    st.markdown("### ☀️ Cenários de dimensionamento")

    cols = st.columns(len(scenarios))
    for col, s in zip(cols, scenarios):
        with col:
            title = scenario_label(s) + (" ⭐ Recomendado" if s.is_recommended else "")
            st.markdown(f"**{title}** (PR {format_number(s.performance_ratio, 2, cfg)})")
            st.metric("Potência", f"{format_number(s.sizing.power_kwp, 2, cfg)} kWp")
            st.metric("Investimento", format_currency(s.analysis.system_cost, cfg))
            st.metric("Payback", f"{format_number(s.analysis.payback_years, 1, cfg)} anos")

    st.dataframe(pd.DataFrame(scenario_rows(scenarios, cfg)), hide_index=True, use_container_width=True)
