"""
Salida directa a la consola del tema.
"""

from typing import Iterable, Mapping, Optional

from leadform.cli.theme.palette import get_console
from leadform.cli.theme.styled import styled_header, styled_message


def print_header(text: str, subtitle: str = None) -> None:
    get_console().print(styled_header(text, subtitle))


def print_success(text: str) -> None:
    get_console().print(styled_message("ok", text))


def print_warning(text: str) -> None:
    get_console().print(styled_message("warn", text))


def print_error(text: str) -> None:
    get_console().print(styled_message("error", text))


def print_info(text: str) -> None:
    get_console().print(styled_message("hint", text))


def print_failures(failures: Iterable, fields_by_key: Optional[Mapping] = None) -> None:
    """
    Imprime fallas de validación como "<etiqueta>: <mensaje>".

    Args:
        failures: ValidationFailure a imprimir
        fields_by_key: Clave -> FieldSchema; sin él se usa la clave del campo
    """
    console = get_console()
    for failure in failures:
        fld = fields_by_key.get(failure.field) if fields_by_key else None
        label = fld.label if fld is not None else failure.field
        console.print(styled_message("error", f"{label}: {failure.message}"))
