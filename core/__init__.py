# Núcleo solar, API pública: dimensionado, análisis financiero, escenarios, financiamiento y clasificación Ley 14.300.
from __future__ import annotations

# ===============================
# API PÚBLICA
# ===============================
from .config import DEFAULT_CONFIG, SolarConfig, load_config, with_overrides
from .contract import (
    ConsumptionInput,
    FinancialAnalysis,
    FinancingOption,
    PaymentModality,
    PhaseType,
    RegulatoryClassification,
    RegulatoryModality,
    Scenario,
    ScenarioName,
    SystemSizing,
    SystemType,
    to_dict,
)
from .errors import (
    ConfigurationError,
    InvalidConfiguration,
    InvalidConsumption,
    InvalidFinancialInput,
    InvalidFinancingParameters,
    InvalidPerformanceRatio,
    InvalidPowerRating,
    SolarCoreError,
    UndefinedPayback,
    UndefinedResult,
    UndefinedROI,
    UnknownModality,
    UnknownPaymentModality,
    UnknownRegulatoryModality,
    ValidationError,
)
from .financial import analyze
from .financing import quote, quote_all
from .formatting import format_currency, format_number, round_half_up
from .llm_context import scenarios_context, system_prompt
from .regulatory import classify
from .scenarios import generate_scenarios, recommended_scenario
from .sizing import size

__all__ = [
    # Configuración
    "SolarConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "with_overrides",
    # Contratos
    "ConsumptionInput",
    "PhaseType",
    "SystemSizing",
    "FinancialAnalysis",
    "Scenario",
    "ScenarioName",
    "FinancingOption",
    "PaymentModality",
    "RegulatoryClassification",
    "RegulatoryModality",
    "SystemType",
    "to_dict",
    # Pipeline
    "size",
    "analyze",
    "generate_scenarios",
    "recommended_scenario",
    "quote",
    "quote_all",
    "classify",
    # Texto
    "round_half_up",
    "format_currency",
    "format_number",
    "scenarios_context",
    "system_prompt",
    # Errores
    "SolarCoreError",
    "ValidationError",
    "ConfigurationError",
    "InvalidConsumption",
    "InvalidPerformanceRatio",
    "InvalidFinancialInput",
    "InvalidFinancingParameters",
    "InvalidPowerRating",
    "UndefinedResult",
    "UndefinedPayback",
    "UndefinedROI",
    "InvalidConfiguration",
    "UnknownModality",
    "UnknownPaymentModality",
    "UnknownRegulatoryModality",
]
