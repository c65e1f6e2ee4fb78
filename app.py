# app.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# === imports del repo ===
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.config import BRASIL_CONFIG, DEFAULT_CONFIG, load_config
from core.errors import ConfigurationError, SolarCoreError
from core.llm_context import glossary_text, scenarios_context
from core.regulatory import classify
from core.scenarios import generate_scenarios, recommended_scenario
from ui import consumption_form, financing_view, regulatory_view, scenarios_view
from ui.regulatory_view import MODALITY_OPTIONS
from ui.state_helpers import ctx_get, is_result_stale, save_result_fingerprint

logger = logging.getLogger(__name__)


def _config():
    try:
        return load_config(BRASIL_CONFIG) if BRASIL_CONFIG.exists() else DEFAULT_CONFIG
    except ConfigurationError as e:
        st.error(f"Configuração inválida: {e}")
        st.stop()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="Yello Solar Hub", layout="wide")
    st.title("☀️ Yello Solar Hub: Copiloto Solar")

    cfg = _config()
    ctx = ctx_get(st.session_state)

    consumption_form.render(ctx)
    ok, errors = consumption_form.validate(ctx)
    if not ok:
        st.error("\n".join(f"• {e}" for e in errors))

    if st.button("Calcular cenários", type="primary", disabled=not ok):
        try:
            ctx.scenarios = generate_scenarios(consumption_form.to_input(ctx), config=cfg)
            save_result_fingerprint(ctx)
        except SolarCoreError as e:
            logger.info("cálculo rechazado: %s", e)
            st.error(str(e))
            ctx.scenarios = None

    if not ctx.scenarios:
        st.info("Informe seus dados e clique em **Calcular cenários**.")
        return

    if is_result_stale(ctx):
        st.warning("Os dados mudaram desde o último cálculo. Clique em **Calcular cenários** novamente.")

    scenarios_view.render(ctx.scenarios, cfg)

    rec = recommended_scenario(ctx.scenarios) or ctx.scenarios[0]
    financing_view.render(ctx, rec.analysis.system_cost, rec.analysis.annual_savings, cfg)

    mods = MODALITY_OPTIONS
    ctx.regulatory["modality"] = st.selectbox(
        "Modalidade de compensação",
        options=mods,
        index=mods.index(ctx.regulatory.get("modality", mods[0])),
    )
    classification = classify(rec.sizing.power_kwp, ctx.regulatory["modality"], cfg)
    regulatory_view.render(classification, cfg)

    with st.expander("Contexto para o assistente"):
        st.code(scenarios_context(ctx.scenarios, classification, cfg), language="text")
    with st.expander("Glossário"):
        st.markdown(glossary_text())


main()
