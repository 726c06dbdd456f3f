# src/bluetuith/core/startup/__init__.py
"""
Orquestração da inicialização do bluetuith.

Componentes principais:
    - context      → StartupContext (store, colaboradores, log de eventos)
    - registry     → ValidatorRegistry (ids únicos, ordem preservada)
    - types        → ValidationStatus, ValidationResult, OptionValidator
    - orchestrator → run_startup (fail-fast, congelamento do store)
"""

from .context import StartupContext
from .orchestrator import EXIT_FAILURE, EXIT_OK, StartupResult, run_startup
from .registry import DuplicateValidatorIdError, ValidatorRegistry
from .types import OptionValidator, ValidationResult, ValidationStatus

__all__ = [
    "EXIT_FAILURE",
    "EXIT_OK",
    "DuplicateValidatorIdError",
    "OptionValidator",
    "StartupContext",
    "StartupResult",
    "ValidationResult",
    "ValidationStatus",
    "ValidatorRegistry",
    "run_startup",
]
