# core/errors.py
from __future__ import annotations


class SolarCoreError(Exception):
    """Base de todos los errores del motor de dimensionado."""


# ==========================================================
# Validación (entrada del llamador; corregir y volver a llamar)
# ==========================================================
class ValidationError(SolarCoreError, ValueError):
    pass


class InvalidConsumption(ValidationError):
    pass


class InvalidPerformanceRatio(ValidationError):
    pass


class InvalidFinancialInput(ValidationError):
    pass


class InvalidFinancingParameters(ValidationError):
    pass


class InvalidPowerRating(ValidationError):
    pass


class UndefinedResult(ValidationError):
    """Cociente con denominador cero. Nunca se devuelve inf/NaN."""


class UndefinedPayback(UndefinedResult):
    pass


class UndefinedROI(UndefinedResult):
    pass


# ==========================================================
# Configuración (constantes de despliegue)
# ==========================================================
class ConfigurationError(SolarCoreError, ValueError):
    pass


class InvalidConfiguration(ConfigurationError):
    pass


class UnknownModality(ValidationError, InvalidConfiguration):
    """Etiqueta de modalidad fuera del conjunto soportado."""


class UnknownPaymentModality(UnknownModality, InvalidFinancingParameters):
    pass


class UnknownRegulatoryModality(UnknownModality):
    pass
