# src/bluetuith/core/startup/types.py
"""
Tipos canônicos da orquestração de inicialização.

Componentes:
    - ValidationStatus → desfecho de um validador de opção
    - ValidationResult → resultado imutável de um validador
    - OptionValidator  → protocolo que todo validador satisfaz

Desfechos possíveis de um validador:
    - UNCHANGED  → opção não informada; store inalterado
    - NORMALIZED → valor validado (e normalizado) gravado no store
    - TERMINATED → ação informativa/terminal concluída (exit 0)
    - FAILED     → falha fatal; atribuído pelo orquestrador
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bluetuith.core.startup.context import StartupContext


class ValidationStatus(str, Enum):
    UNCHANGED = "unchanged"
    NORMALIZED = "normalized"
    TERMINATED = "terminated"
    FAILED = "failed"


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado imutável da execução de um validador.

    Campos:
    - option: identificador do validador (ex.: "adapter-states")
    - status: desfecho (`ValidationStatus`)
    - summary: resumo textual
    - output: texto destinado ao stdout (ações informativas)
    - exit_code: status de saída quando `status` é TERMINATED ou FAILED
    - payload: dados adicionais (ex.: `{"error": ErrorPayload.to_dict()}`)
    """

    option: str
    status: ValidationStatus
    summary: str
    output: Optional[str] = None
    exit_code: int = 0
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def stops_startup(self) -> bool:
        return self.status in (ValidationStatus.TERMINATED, ValidationStatus.FAILED)


@runtime_checkable
class OptionValidator(Protocol):
    """
    Contrato de um validador de opção.

    `run` lê o store do contexto e, conforme a opção:
        - retorna UNCHANGED quando a opção não foi informada
        - grava o valor normalizado e retorna NORMALIZED
        - levanta uma subclasse de `ConfigError` em valor inválido

    Validadores são idempotentes.
    """

    id: str

    def run(self, ctx: "StartupContext") -> ValidationResult:
        ...
