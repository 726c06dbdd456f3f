# src/bluetuith/core/errors.py
"""
Exceções canônicas da resolução de configuração do bluetuith.

Este módulo define a hierarquia oficial de exceções utilizadas durante o
parse de flags, o carregamento do arquivo de configuração e a validação
semântica de cada opção.

Toda falha aqui representada é fatal no ponto de detecção: o orquestrador
interrompe a inicialização, converte a exceção em `ErrorPayload` e o
processo termina com status diferente de zero. Não existe retry nem
inicialização parcial.

Taxonomia:
    - FLAG_SYNTAX         → flag desconhecida ou malformada
    - CONFIG_FILE_SYNTAX  → arquivo de configuração malformado
    - CONFIG_PATH         → diretório de configuração indisponível
    - OPTION_FORMAT       → valor de opção semanticamente inválido
    - REFERENCE_NOT_FOUND → adapter ou device inexistente
    - FILESYSTEM          → diretório de recebimento inacessível
    - THEME               → tema malformado ou rejeitado
    - STORE_FROZEN        → escrita no store após a inicialização

Invariantes:
    - Todas as exceções herdam de `ConfigError`
    - `str(exc)` é sempre a mensagem exibida ao usuário
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Códigos estáveis de erro (não são texto livre)."""

    FLAG_SYNTAX = "FLAG_SYNTAX"
    CONFIG_FILE_SYNTAX = "CONFIG_FILE_SYNTAX"
    CONFIG_PATH = "CONFIG_PATH"
    OPTION_FORMAT = "OPTION_FORMAT"
    REFERENCE_NOT_FOUND = "REFERENCE_NOT_FOUND"
    FILESYSTEM = "FILESYSTEM"
    THEME = "THEME"
    STORE_FROZEN = "STORE_FROZEN"


@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload serializável de uma falha de validação.

    Campos:
    - type: código estável do erro (`ErrorKind`)
    - message: mensagem curta exibida ao usuário
    - details: dados estruturados para diagnóstico
    - hint: ação sugerida (opcional)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigError(Exception):
    """
    Exceção base para erros de resolução de configuração.

    Subclasses definem `kind`; `details` carrega apenas dados
    serializáveis e `hint` uma sugestão opcional ao usuário.
    """

    kind: ErrorKind = ErrorKind.OPTION_FORMAT

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.kind.value,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Flags / arquivo
# ---------------------------------------------------------------------------

class FlagSyntaxError(ConfigError):
    """Flag desconhecida ou valor malformado (mensagem do argparse, verbatim)."""

    kind = ErrorKind.FLAG_SYNTAX


class ConfigFileSyntaxError(ConfigError):
    """
    O arquivo de configuração existe mas não pôde ser interpretado.

    A ausência do arquivo NÃO é erro; apenas conteúdo malformado é.
    """

    kind = ErrorKind.CONFIG_FILE_SYNTAX


class InvalidConfigRootTypeError(ConfigFileSyntaxError):
    """O conteúdo raiz do arquivo não é um mapa chave-valor."""


class ConfigPathError(ConfigError):
    """O diretório de configuração do usuário não pôde ser resolvido ou criado."""

    kind = ErrorKind.CONFIG_PATH


# ---------------------------------------------------------------------------
# Semântica de opções
# ---------------------------------------------------------------------------

class OptionFormatError(ConfigError):
    """Valor de opção com formato ou combinação inválida."""

    kind = ErrorKind.OPTION_FORMAT


class InvalidPropertyError(OptionFormatError):
    """Propriedade de adapter fora do conjunto fixo de propriedades."""


class InvalidStateError(OptionFormatError):
    """Estado fora do conjunto de sinônimos aceitos."""


class AdapterNotFoundError(ConfigError):
    kind = ErrorKind.REFERENCE_NOT_FOUND


class DeviceNotFoundError(ConfigError):
    kind = ErrorKind.REFERENCE_NOT_FOUND


class DirectoryNotAccessibleError(ConfigError):
    kind = ErrorKind.FILESYSTEM


class ThemeFormatError(ConfigError):
    """O tema inline não é texto estruturado válido ou não é um mapa."""

    kind = ErrorKind.THEME


class ThemeError(ConfigError):
    """Elemento ou cor rejeitados pelo motor de tema."""

    kind = ErrorKind.THEME


class FrozenStoreError(ConfigError):
    """Tentativa de escrita no PropertyStore após o congelamento."""

    kind = ErrorKind.STORE_FROZEN
