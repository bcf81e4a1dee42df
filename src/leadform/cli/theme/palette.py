"""
Paletas de colores de la CLI y tema activo.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.theme import Theme


class ThemeName(Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class ColorPalette:
    """Colores por rol dentro de las vistas del formulario."""
    title: str          # Encabezados y títulos de tabla
    heading: str        # Cabeceras de columna
    lov: str            # Etiquetas de LOV resueltas

    ok: str
    warn: str
    danger: str
    hint: str
    faint: str          # Campos sin valor, textos de ayuda

    value: str          # Valores formateados
    label: str          # Etiquetas de campo
    required_mark: str  # Marca '*' de campo requerido
    border: str


THEME_DEFAULT = ColorPalette(
    title="#5f87d7",
    heading="#5fafaf",
    lov="#af87d7",
    ok="#5faf5f",
    warn="#d7af00",
    danger="#d75f5f",
    hint="#5f87d7",
    faint="#8a8a8a",
    value="#ffd75f",
    label="#bcbcbc",
    required_mark="#d75f5f",
    border="#585858",
)

THEME_MINIMAL = ColorPalette(
    title="#ffffff",
    heading="#b2b2b2",
    lov="#d0d0d0",
    ok="#87d787",
    warn="#ffd787",
    danger="#ff8787",
    hint="#b2b2b2",
    faint="#6c6c6c",
    value="#ffffff",
    label="#949494",
    required_mark="#ff8787",
    border="#444444",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Tema activo y consola compartida de la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # La consola se recrea con los nuevos estilos

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Consola Rich con los estilos del tema activo."""
        if cls._console is None:
            p = cls._palette
            cls._console = Console(theme=Theme({
                "form.title": f"bold {p.title}",
                "form.label": p.label,
                "form.value": f"bold {p.value}",
                "form.lov": p.lov,
                "form.missing": f"italic {p.faint}",
                "form.required": f"bold {p.required_mark}",
                "form.ok": p.ok,
                "form.warn": p.warn,
                "form.error": p.danger,
                "form.hint": p.hint,
            }))
        return cls._console


def get_console() -> Console:
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    return CLITheme.get_palette()
