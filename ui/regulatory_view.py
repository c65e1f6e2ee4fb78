# ui/regulatory_view.py
from __future__ import annotations

import streamlit as st

from core.config import DEFAULT_CONFIG, SolarConfig
from core.contract import RegulatoryClassification, RegulatoryModality
from core.regulatory import modality_label, system_type_label

MODALITY_OPTIONS = [m.value for m in RegulatoryModality]


def render(c: RegulatoryClassification, cfg: SolarConfig = DEFAULT_CONFIG) -> None:
    st.markdown("### 📋 Nota Regulatória - Lei 14.300/2022")

    st.info(f"**Classificação do seu sistema:** {system_type_label(c)}")
    st.success(f"**Modalidade:** {modality_label(c)}")
    st.warning(f"**Créditos energéticos:** validade de {cfg.credit_validity_months} meses para uso dos créditos gerados")

    st.markdown("#### ⚖️ Principais pontos da Lei 14.300/2022")
    for n in c.notes:
        st.write("• " + n)

    st.caption(
        "Esta é uma orientação geral. Para informações específicas sobre tarifas, incentivos e processos "
        "de conexão, consulte sua distribuidora de energia local e a Resolução Normativa nº 1.000/2021 da ANEEL."
    )
