"""
Constructores de Text/Panel estilizados. No imprimen.

Los estilos "form.*" los define la consola del tema activo.
"""

from rich import box
from rich.panel import Panel
from rich.text import Text

from leadform.cli.theme.palette import get_palette

# Prefijo de cada tipo de mensaje
MESSAGE_MARKS = {
    "ok": "[+]",
    "warn": "[!]",
    "error": "[x]",
    "hint": "[i]",
}


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Panel de encabezado con subtítulo opcional."""
    content = Text(text, style="form.title")
    if subtitle:
        content.append(f"\n{subtitle}", style="form.missing")
    return Panel(content, border_style=get_palette().border, box=box.ROUNDED, padding=(0, 2))


def styled_field_label(label: str, required: bool = False) -> Text:
    """Etiqueta de campo; los requeridos llevan ' *'."""
    text = Text(label, style="form.label")
    if required:
        text.append(" *", style="form.required")
    return text


def styled_value(value: str, present: bool = True) -> Text:
    return Text(value, style="form.value" if present else "form.missing")


def styled_message(kind: str, text: str) -> Text:
    """
    Mensaje de una línea con su marca.

    Args:
        kind: "ok", "warn", "error" o "hint"
    """
    return Text(f"{MESSAGE_MARKS[kind]} {text}", style=f"form.{kind}")
