"""
Comandos CLI para validar y mostrar registros guardados en JSON.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from leadform.cli.common import (
    load_fields_or_exit,
    load_record_or_exit,
    load_registry_or_exit,
)
from leadform.cli.theme import print_failures, print_record_table, print_success
from leadform.core import validate_record


def validate_command(
    record_file: Annotated[Path, typer.Argument(help="Registro JSON a validar")],
    schema: Annotated[Optional[Path], typer.Option("--schema", "-s", help="JSON de campos")] = None,
):
    """
    Valida un registro contra el esquema.

    Termina con código 1 si hay fallas.

    Ejemplo:
        leadform validate lead.json
    """
    fields = load_fields_or_exit(schema)
    record = load_record_or_exit(record_file)

    failures = validate_record(fields, record)
    if failures:
        print_failures(failures, {f.key: f for f in fields})
        typer.echo(f"\n{len(failures)} campo(s) con errores")
        raise typer.Exit(1)

    print_success("Registro válido")


def show_command(
    record_file: Annotated[Path, typer.Argument(help="Registro JSON a mostrar")],
    schema: Annotated[Optional[Path], typer.Option("--schema", "-s", help="JSON de campos")] = None,
    lov: Annotated[Optional[Path], typer.Option("--lov", help="JSON de listas de valores")] = None,
    title: Annotated[str, typer.Option("--title", "-t", help="Título de la vista")] = "Lead Details",
):
    """
    Muestra un registro formateado (vista de solo lectura).

    Ejemplo:
        leadform show lead.json
    """
    fields = load_fields_or_exit(schema)
    registry = load_registry_or_exit(lov)
    record = load_record_or_exit(record_file)

    print_record_table(fields, record, registry, title=title)
