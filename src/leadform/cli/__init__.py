"""
CLI de LeadForm - Captura y validación de registros con esquema dinámico.

Comandos:
- fields: Muestra el esquema de campos
- lov: Lista las listas de valores
- validate: Valida un registro JSON
- show: Muestra un registro formateado
- capture: Captura interactiva de un lead
"""

from typing import Annotated

import typer

from leadform.cli.common import get_settings, setup_logging
from leadform.cli.theme import CLITheme, ThemeName

# Crear aplicación principal
app = typer.Typer(
    name="leadform",
    help="Captura, validación y vista de registros definidos por esquema.",
    no_args_is_help=True,
)


def _register_commands():
    """Registra los comandos de forma diferida."""
    from leadform.cli.capture import capture_command
    from leadform.cli.record import show_command, validate_command
    from leadform.cli.schema import fields_command, lov_command

    app.command("fields")(fields_command)
    app.command("lov")(lov_command)
    app.command("validate")(validate_command)
    app.command("show")(show_command)
    app.command("capture")(capture_command)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar logs de depuración")] = False,
    theme: Annotated[ThemeName, typer.Option("--theme", help="Tema de colores")] = ThemeName.DEFAULT,
):
    """
    LeadForm - registros de CRM con campos configurables.

    El esquema de campos y las listas de valores se leen de JSON
    (LEADFORM_SCHEMA, LEADFORM_LOV) o se usan los incluidos.
    """
    CLITheme.set_theme(theme)
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)


_register_commands()


__all__ = [
    "app",
]
