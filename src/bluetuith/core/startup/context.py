# src/bluetuith/core/startup/context.py
"""
StartupContext — contexto compartilhado pelos validadores de opção.

O contexto é criado uma vez, após o loader, e passado explicitamente a
cada validador. Ele é o único meio de acesso:
    - ao PropertyStore resolvido
    - aos colaboradores externos (Bluetooth, motor de tema)
    - ao log estruturado de eventos e aos warnings não fatais

Não existe estado global: o mesmo contexto é depois entregue ao restante
da aplicação, com o store já congelado.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Tuple

from bluetuith import VERSION
from bluetuith.bluez import Bluetooth
from bluetuith.core.config.schema import OPTIONS, OptionDescriptor
from bluetuith.core.config.store import PropertyStore
from bluetuith.theme import ThemeEngine


@dataclass
class StartupContext:
    """
    Campos:
    - store: propriedades resolvidas (mutável até o fim da inicialização)
    - config_path: caminho do arquivo de configuração
    - bluetooth: enumeração de adapters/devices (somente leitura)
    - theme: motor de tema
    - version: string "<versão>@<build>"
    - options: registro de opções (usado por `--generate`)
    - events: log estruturado de eventos
    - warnings: avisos não fatais, na ordem em que ocorreram
    """

    store: PropertyStore
    config_path: Path
    bluetooth: Bluetooth
    theme: ThemeEngine
    version: str = VERSION
    options: Tuple[OptionDescriptor, ...] = OPTIONS

    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, option: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "option": option,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, option: str, message: str) -> None:
        self.warnings.append(message)
        self.log(option=option, level="WARNING", message=message)
