# src/bluetuith/core/startup/orchestrator.py
"""
Orquestrador de inicialização: executa os validadores em ordem fixa.

Política de execução:
    - cada validador roda no máximo uma vez, na ordem do registro
    - fail-fast: a primeira `ConfigError` encerra a inicialização com
      resultado FAILED e exit code diferente de zero
    - ação terminal (`--version`, `--list-adapters`, `--generate`) encerra
      a inicialização com exit code 0 e sua saída informativa
    - somente quando todos os validadores concluem o store é congelado

Nenhum consumidor recebe um store parcialmente resolvido: em caso de falha
ou término antecipado, `StartupResult.store` é None.

Exceções que não derivam de `ConfigError` indicam defeito de programação
e são propagadas sem conversão.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from bluetuith.core.config.store import PropertyStore
from bluetuith.core.errors import ConfigError, ErrorPayload
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.registry import ValidatorRegistry
from bluetuith.core.startup.types import OptionValidator, ValidationResult, ValidationStatus

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass
class StartupResult:
    """Resultado consolidado da inicialização."""

    results: Dict[str, ValidationResult]
    exit_code: int = EXIT_OK
    output: List[str] = field(default_factory=list)
    error: Optional[ErrorPayload] = None
    store: Optional[PropertyStore] = None
    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True quando a aplicação pode prosseguir com o store resolvido."""
        return self.store is not None

    @property
    def terminated(self) -> bool:
        return self.store is None and self.error is None


def _failed_result(validator_id: str, exc: ConfigError) -> ValidationResult:
    payload = exc.to_payload()
    return ValidationResult(
        option=validator_id,
        status=ValidationStatus.FAILED,
        summary=payload.message,
        exit_code=EXIT_FAILURE,
        payload={"error": payload.to_dict()},
    )


def run_startup(
    ctx: StartupContext,
    validators: Union[ValidatorRegistry, Iterable[OptionValidator]],
) -> StartupResult:
    if isinstance(validators, ValidatorRegistry):
        registry = validators
    else:
        registry = ValidatorRegistry()
        for validator in validators:
            registry.add(validator)

    results: Dict[str, ValidationResult] = {}
    output: List[str] = []

    for validator in registry.list():
        vid = validator.id
        try:
            result = validator.run(ctx)
        except ConfigError as exc:
            failed = _failed_result(vid, exc)
            results[vid] = failed
            ctx.log(option=vid, level="ERROR", message=failed.summary, kind=exc.kind.value)
            return StartupResult(
                results=results,
                exit_code=EXIT_FAILURE,
                output=output,
                error=exc.to_payload(),
                events=ctx.events,
                warnings=ctx.warnings,
            )

        if not isinstance(result, ValidationResult):
            raise TypeError(f"Validator '{vid}' must return ValidationResult")

        results[vid] = result
        ctx.log(option=vid, level="INFO", message=result.summary, status=result.status.value)

        if result.output:
            output.append(result.output)

        if result.stops_startup:
            return StartupResult(
                results=results,
                exit_code=result.exit_code,
                output=output,
                events=ctx.events,
                warnings=ctx.warnings,
            )

    ctx.store.freeze()

    return StartupResult(
        results=results,
        exit_code=EXIT_OK,
        output=output,
        store=ctx.store,
        events=ctx.events,
        warnings=ctx.warnings,
    )
