# src/bluetuith/theme.py
"""
Tabela de elementos de tema e aplicação de cores.

O validador de `theme` entrega um mapa `elemento -> cor` já achatado; este
módulo verifica se cada elemento é reconhecido e se cada cor é válida, e
só então aplica o mapa inteiro (nada é aplicado se alguma entrada falhar).

Cores aceitas: nomes de cor (W3C/terminal), `#rgb`, `#rrggbb`,
`default` e `transparent`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Protocol, runtime_checkable

from bluetuith.core.errors import ThemeError

DEFAULT_ELEMENTS: Dict[str, str] = {
    "Adapter": "white",
    "AdapterPowered": "green",
    "AdapterNotPowered": "red",
    "AdapterDiscoverable": "aqua",
    "AdapterScanning": "yellow",
    "AdapterPairable": "blue",
    "Device": "white",
    "DeviceType": "white",
    "DeviceAlias": "white",
    "DeviceConnected": "green",
    "DeviceDiscovered": "orange",
    "DeviceProperty": "grey",
    "DevicePropertyConnected": "green",
    "DevicePropertyDiscovered": "orange",
    "Menu": "white",
    "MenuBar": "default",
    "MenuItem": "white",
    "StatusInfo": "white",
    "StatusError": "red",
    "ProgressBar": "white",
    "ProgressText": "white",
    "Text": "white",
    "Border": "white",
    "Background": "default",
}

COLOR_NAMES = frozenset(
    {
        "default", "transparent",
        "black", "maroon", "green", "olive", "navy", "purple", "teal", "silver",
        "gray", "grey", "red", "lime", "yellow", "blue", "fuchsia", "aqua", "white",
        "orange", "pink", "brown", "cyan", "magenta", "gold", "indigo", "violet",
        "crimson", "coral", "salmon", "khaki", "beige", "ivory", "lavender",
        "turquoise", "tomato", "orchid", "plum", "tan", "chocolate", "firebrick",
        "darkred", "darkgreen", "darkblue", "darkcyan", "darkmagenta", "darkorange",
        "darkgray", "darkgrey", "lightgray", "lightgrey", "lightblue", "lightgreen",
        "lightyellow", "lightcyan", "skyblue", "steelblue", "slategray", "slategrey",
        "seagreen", "springgreen", "limegreen", "forestgreen", "royalblue",
        "dodgerblue", "deepskyblue", "hotpink", "deeppink",
    }
)

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_valid_color(value: str) -> bool:
    return value.lower() in COLOR_NAMES or bool(_HEX_RE.match(value))


@runtime_checkable
class ThemeEngine(Protocol):
    def parse_theme_config(self, theme_config: Mapping[str, str]) -> None:
        """Valida e aplica o mapa; levanta `ThemeError` em entrada inválida."""
        ...

    def element_data(self) -> str:
        """Texto de ajuda descrevendo os elementos de tema."""
        ...


@dataclass
class Theme:
    elements: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ELEMENTS))

    def parse_theme_config(self, theme_config: Mapping[str, str]) -> None:
        for element in sorted(theme_config):
            color = theme_config[element]

            if element not in self.elements:
                raise ThemeError(
                    f"Theme element '{element}' is invalid.",
                    details={"element": element},
                    hint="Valid elements are listed in --help.",
                )

            if not is_valid_color(color):
                raise ThemeError(
                    f"Color '{color}' for theme element '{element}' is invalid.",
                    details={"element": element, "color": color},
                )

        self.elements.update(theme_config)

    def element_data(self) -> str:
        text = "Theme elements:\n"
        for element in self.elements:
            text += f"  {element:<26} (default: {DEFAULT_ELEMENTS.get(element, 'default')})\n"
        return text
