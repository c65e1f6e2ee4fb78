# core/llm_context.py
"""
Texto para el asistente conversacional externo.

Solo arma strings; enviarlos (y cualquier transcripción de audio) le
toca al llamador.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .config import DEFAULT_CONFIG, SolarConfig
from .contract import RegulatoryClassification, Scenario
from .formatting import format_currency, format_number
from .regulatory import modality_label, system_type_label


GLOSSARY: Dict[str, str] = {
    "kWp": "Quilowatt-pico: potência máxima que um painel solar pode gerar em condições ideais de teste (1000 W/m², 25°C).",
    "PR": "Performance Ratio: índice que mede a eficiência real do sistema. Considera perdas por temperatura, sujeira, cabos, inversor, etc.",
    "kWh": "Quilowatt-hora: unidade de medida de energia. É o que você consome e paga na conta de luz.",
    "TUSD Fio B": "Taxa de distribuição de energia. Pela Lei 14.300, novos sistemas pagam parte desta taxa.",
    "Microgeração": "Sistema de até 75 kWp de potência instalada.",
    "Minigeração": "Sistema de 75 kWp até 5 MW de potência.",
    "Payback": "Tempo necessário para recuperar o investimento através da economia gerada.",
    "ROI": "Return on Investment: retorno percentual do investimento ao longo da vida útil.",
    "Geração Compartilhada": "Modalidade onde múltiplos consumidores compartilham uma mesma usina solar.",
    "Autoconsumo Remoto": "Geração em um local e consumo em outro, desde que mesmo titular.",
}


def glossary_text(terms: Optional[Iterable[str]] = None) -> str:
    keys = list(GLOSSARY) if terms is None else [t for t in terms if t in GLOSSARY]
    return "\n".join(f"- {k}: {GLOSSARY[k]}" for k in keys)


def _scenario_line(s: Scenario, cfg: SolarConfig) -> str:
    z, a = s.sizing, s.analysis
    mark = " [recomendado]" if s.is_recommended else ""
    return (
        f"{s.name}{mark}: PR {format_number(s.performance_ratio, 2, cfg)} | "
        f"{format_number(z.power_kwp, 2, cfg)} kWp | {z.module_count} módulos | "
        f"{format_number(z.area_m2, 2, cfg)} m² | {format_number(z.monthly_generation_kwh, 2, cfg)} kWh/mês | "
        f"custo {format_currency(a.system_cost, cfg)} | economia/ano {format_currency(a.annual_savings, cfg)} | "
        f"payback {format_number(a.payback_years, 2, cfg)} anos | ROI {format_number(a.roi_pct, 2, cfg)}% | "
        f"economia {cfg.lifetime_years} anos {format_currency(a.lifetime_savings, cfg)}"
    )


def scenarios_context(
    scenarios: Sequence[Scenario],
    classification: RegulatoryClassification,
    config: SolarConfig = DEFAULT_CONFIG,
) -> str:
    """Bloque compacto: una línea por escenario y luego la clasificación Ley 14.300."""
    lines: List[str] = ["CENÁRIOS:"]
    lines.extend(_scenario_line(s, config) for s in scenarios)
    lines.append("LEI 14.300/2022:")
    lines.append(f"Tipo: {system_type_label(classification)}")
    lines.append(f"Modalidade: {modality_label(classification)}")
    lines.append(f"Validade dos créditos: {classification.credit_validity}")
    lines.extend(f"- {n}" for n in classification.notes)
    return "\n".join(lines)


def system_prompt(config: SolarConfig = DEFAULT_CONFIG) -> str:
    presets = ", ".join(f"{name} ({format_number(pr, 2, config)})" for name, pr in config.scenario_presets)
    limit = format_number(config.micro_generation_limit_kwp, 0, config)
    return "\n".join([
        "Você é o Copiloto do Yello Solar Hub, um assistente especializado em energia solar fotovoltaica no Brasil.",
        "",
        "Seu papel:",
        "- Ajudar clientes a dimensionar sistemas solares fotovoltaicos",
        "- Explicar conceitos técnicos de forma clara e amigável",
        "- Calcular economia, ROI e payback",
        "- Orientar sobre a Lei 14.300/2022 e regulamentações da ANEEL",
        "- Recomendar modalidades (consumo local, geração compartilhada, autoconsumo remoto)",
        "- Apresentar opções de financiamento",
        "",
        "Diretrizes:",
        "1. Fale em português brasileiro (pt-BR)",
        "2. Seja claro, técnico mas amigável",
        "3. Explique jargões quando usá-los (kWp, PR, kWh, TUSD, etc)",
        "4. Peça apenas informações essenciais: CEP, consumo médio mensal (kWh) e tipo de fase elétrica",
        f"5. Sempre apresente {len(config.scenario_presets)} cenários com diferentes Performance Ratios: {presets}",
        "6. Calcule e apresente ROI e payback",
        "7. Ofereça geração compartilhada (GC) para clientes sem telhado adequado",
        "8. Mencione a assinatura de energia solar quando apropriado",
        "9. Sempre inclua uma nota regulatória sobre a Lei 14.300/2022",
        "",
        "Conhecimento específico:",
        f"- Microgeração: até {limit} kWp; Minigeração: {limit} kWp até 5 MW",
        f"- Créditos energéticos válidos por {config.credit_validity_months} meses",
        "- Sistemas instalados após 12/01/2023 têm cobrança gradual de TUSD Fio B",
        f"- Tarifa média: {format_currency(config.default_tariff, config)}/kWh",
        f"- Irradiação média: {format_number(config.irradiance_kwh_m2_day, 1, config)} kWh/m²/dia",
        f"- Vida útil dos sistemas: {config.lifetime_years} anos",
        f"- Degradação: {format_number(config.annual_degradation * 100, 1, config)}% ao ano",
    ])
