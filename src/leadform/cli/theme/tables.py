"""
Tablas Rich para el esquema, las LOV y la vista de un registro.
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional

from rich.table import Table
from rich.text import Text
from rich import box

from leadform.cli.theme.palette import get_console, get_palette
from leadform.core.formatting import format_value, has_value
from leadform.cli.theme.styled import styled_field_label, styled_value

if TYPE_CHECKING:
    from leadform.config import FieldSchema
    from leadform.data.lov_registry import LovRegistry

NOT_PROVIDED = "Not provided"


def form_table(title: Optional[str], columns: list[tuple[str, str]]) -> Table:
    """Tabla con el estilo del tema; columns es [(nombre, justify), ...]."""
    p = get_palette()
    table = Table(
        title=title,
        title_style="form.title",
        border_style=p.border,
        header_style=f"bold {p.heading}",
        box=box.ROUNDED,
    )
    for name, justify in columns:
        table.add_column(name, justify=justify)
    return table


def print_schema_table(fields: list["FieldSchema"], title: str = "CAMPOS") -> None:
    """Imprime el esquema de campos."""
    console = get_console()

    table = form_table(title, [
        ("#", "right"),
        ("Clave", "left"),
        ("Etiqueta", "left"),
        ("Tipo", "left"),
        ("Req.", "center"),
        ("LOV", "left"),
        ("Rango", "left"),
    ])

    for fld in fields:
        bounds = ""
        if fld.min_value or fld.max_value:
            bounds = f"{fld.min_value or ''}..{fld.max_value or ''}"
        key_style = None if fld.visible else "form.missing"
        table.add_row(
            str(fld.display_order),
            Text(fld.key, style=key_style),
            fld.label,
            fld.data_type.value,
            "*" if fld.required else "",
            fld.lov_code or "",
            bounds,
        )

    console.print(table)


def print_lov_table(registry: "LovRegistry", code: Optional[str] = None) -> None:
    """
    Imprime las listas de valores.

    Args:
        registry: Registro de LOV
        code: Si se indica, solo imprime las opciones de ese código
    """
    console = get_console()

    if code is not None:
        table = form_table(code, [("Valor", "left"), ("Etiqueta", "left")])
        for opt in registry.options(code):
            table.add_row(opt.value, Text(opt.label, style="form.lov"))
        console.print(table)
        return

    table = form_table("LISTAS DE VALORES", [
        ("Código", "left"),
        ("Opciones", "right"),
        ("Etiquetas", "left"),
    ])
    for lov_code in registry.codes():
        options = registry.options(lov_code)
        table.add_row(
            lov_code,
            str(len(options)),
            ", ".join(opt.label for opt in options),
        )
    console.print(table)


def print_record_table(
    fields: list["FieldSchema"],
    record: Mapping[str, Any],
    registry: "LovRegistry" = None,
    title: str = "Lead Details",
) -> None:
    """
    Imprime la vista de solo lectura de un registro.

    Los campos sin valor se muestran como "Not provided"; el texto de
    ayuda del campo aparece debajo del valor.
    """
    console = get_console()

    table = form_table(title, [("Campo", "left"), ("Valor", "left")])

    for fld in fields:
        if not fld.visible:
            continue
        value = record.get(fld.key)
        if has_value(value):
            cell = styled_value(format_value(fld, value, registry))
        else:
            cell = styled_value(NOT_PROVIDED, present=False)
        if fld.help_text:
            cell.append(f"\n{fld.help_text}", style="form.missing")
        table.add_row(styled_field_label(fld.label, fld.required), cell)

    console.print(table)
