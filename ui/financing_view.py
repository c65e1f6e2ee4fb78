# ui/financing_view.py
from __future__ import annotations

from typing import List

import streamlit as st

from core.config import DEFAULT_CONFIG, SolarConfig
from core.contract import FinancingOption, PaymentModality
from core.financing import quote
from core.formatting import format_currency, format_number

_LABELS = {
    PaymentModality.CASH.value: "À Vista",
    PaymentModality.FINANCED.value: "Financiado",
    PaymentModality.SUBSCRIPTION.value: "Assinatura",
    PaymentModality.SHARED_GENERATION.value: "GC",
}


def summary_lines(opt: FinancingOption, cfg: SolarConfig = DEFAULT_CONFIG) -> List[str]:
    """Líneas bajo el selector; compara el pago mensual con el ahorro actual."""
    out: List[str] = []
    if opt.modality == PaymentModality.CASH:
        out.append(f"Valor total: {format_currency(opt.total_value, cfg)}")
    elif opt.modality == PaymentModality.FINANCED:
        out.append(f"Entrada: {format_currency(opt.down_payment, cfg)}")
        out.append(f"{opt.installment_count}x de {format_currency(opt.installment_value, cfg)}")
        out.append(f"Taxa: {format_number(opt.annual_rate * 100, 1, cfg)}% a.a.")
        out.append(f"Valor total: {format_currency(opt.total_value, cfg)}")
    else:
        out.append(f"Mensalidade: {format_currency(opt.monthly_fee, cfg)}")

    pay = opt.monthly_payment
    if pay is not None and opt.monthly_savings is not None:
        diff = opt.monthly_savings - pay
        out.append(f"Economia mensal atual: {format_currency(opt.monthly_savings, cfg)} (saldo {format_currency(diff, cfg)}/mês)")
    return out


def render(ctx, system_cost: float, annual_savings: float, cfg: SolarConfig = DEFAULT_CONFIG) -> None:
    st.markdown("### 💰 Opções de Financiamento")
    st.caption("Compare o valor da parcela com sua conta de energia atual")

    f = ctx.financing
    mods = list(_LABELS)
    f["modality"] = st.radio(
        "Modalidade de Pagamento",
        options=mods,
        index=mods.index(f.get("modality", PaymentModality.CASH.value)),
        format_func=lambda m: _LABELS[m],
        horizontal=True,
    )

    if f["modality"] == PaymentModality.FINANCED.value:
        default_down = system_cost * float(cfg.default_down_payment_share)
        f["down_payment"] = st.slider(
            "Entrada (R$)",
            min_value=0.0,
            max_value=float(system_cost),
            value=float(min(f.get("down_payment") or default_down, system_cost)),
        )
        f["installments"] = st.select_slider("Parcelas", options=[12, 24, 36, 48, 60, 72, 84, 96, 120], value=int(f.get("installments") or 60))

    opt = quote(
        system_cost,
        annual_savings,
        f["modality"],
        down_payment=f.get("down_payment"),
        installments=f.get("installments"),
        config=cfg,
    )
    for line in summary_lines(opt, cfg):
        st.write("• " + line)

    ctx.financing = f
