# src/bluetuith/core/startup/registry.py
"""
Registro ordenado de validadores de opção.

Garante, antes da execução:
    - cada validador possui um `id` não vazio
    - não existem ids duplicados
    - a ordem de registro é preservada (é a ordem de execução)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from bluetuith.core.startup.types import OptionValidator


class DuplicateValidatorIdError(ValueError):
    """Dois validadores registrados com o mesmo `id`."""


@dataclass
class ValidatorRegistry:
    _validators: Dict[str, OptionValidator] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, validator: OptionValidator) -> None:
        validator_id = getattr(validator, "id", None)
        if not isinstance(validator_id, str) or not validator_id.strip():
            raise ValueError("validator.id must be a non-empty string")

        if validator_id in self._validators:
            raise DuplicateValidatorIdError(f"Duplicate validator id: {validator_id}")

        self._validators[validator_id] = validator
        self._order.append(validator_id)

    def get(self, validator_id: str) -> OptionValidator:
        return self._validators[validator_id]

    def list(self) -> List[OptionValidator]:
        return [self._validators[vid] for vid in self._order]

    def ids(self) -> List[str]:
        return list(self._order)
