"""
Comandos CLI para inspeccionar el esquema de campos y las LOV.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from leadform.cli.common import (
    load_fields_or_exit,
    load_registry_or_exit,
    warn_unresolved_lovs,
)
from leadform.cli.theme import print_error, print_lov_table, print_schema_table


def fields_command(
    schema: Annotated[Optional[Path], typer.Option("--schema", "-s", help="JSON de campos")] = None,
    lov: Annotated[Optional[Path], typer.Option("--lov", help="JSON de listas de valores")] = None,
    all_fields: Annotated[bool, typer.Option("--all", "-a", help="Incluir campos ocultos")] = False,
):
    """
    Muestra los campos del esquema.

    Ejemplos:
        leadform fields
        leadform fields --schema campos.json --all
    """
    fields = load_fields_or_exit(schema)
    registry = load_registry_or_exit(lov)
    warn_unresolved_lovs(fields, registry)

    if not all_fields:
        fields = [f for f in fields if f.visible]
    print_schema_table(fields)


def lov_command(
    code: Annotated[Optional[str], typer.Argument(help="Código de LOV (ej: LEAD_STATUS_LOV)")] = None,
    lov: Annotated[Optional[Path], typer.Option("--lov", help="JSON de listas de valores")] = None,
):
    """
    Lista las listas de valores, o las opciones de un código.

    Ejemplos:
        leadform lov
        leadform lov COUNTRY_LOV
    """
    registry = load_registry_or_exit(lov)

    if code is not None and code not in registry:
        print_error(f"LOV no encontrada: {code}")
        typer.echo(f"  Códigos disponibles: {', '.join(registry.codes())}")
        raise typer.Exit(1)

    print_lov_table(registry, code)
