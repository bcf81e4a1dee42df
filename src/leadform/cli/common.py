"""
Utilidades comunes para módulos CLI.

Carga de configuración, esquema, LOV y registros con salida de error
uniforme (mensaje estilizado + código 1).
"""

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from leadform.config import AppSettings, FieldSchema
from leadform.data import LovRegistry, SchemaError, check_lov_references, load_schema
from leadform.store import load_record
from leadform.cli.theme import get_console, print_error, print_warning

_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Obtiene (o crea desde el entorno) la configuración de la CLI."""
    global _settings
    if _settings is None:
        try:
            _settings = AppSettings.from_env()
        except ValidationError as e:
            print_error(f"Configuración inválida: {e}")
            raise typer.Exit(1)
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


def setup_logging(level: str) -> None:
    """Instala un RichHandler en el logger del paquete."""
    logger = logging.getLogger("leadform")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=get_console(), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def load_fields_or_exit(schema_path: Optional[Path] = None) -> list[FieldSchema]:
    """Carga el esquema; ante error imprime el mensaje y termina."""
    path = schema_path or get_settings().schema_path
    try:
        return load_schema(path)
    except FileNotFoundError:
        print_error(f"Esquema no encontrado: {path}")
        raise typer.Exit(1)
    except SchemaError as e:
        print_error(str(e))
        raise typer.Exit(1)


def load_registry_or_exit(lov_path: Optional[Path] = None) -> LovRegistry:
    """Carga el registro de LOV; ante error imprime el mensaje y termina."""
    path = lov_path or get_settings().lov_path
    try:
        return LovRegistry.from_json(path) if path else LovRegistry.default()
    except FileNotFoundError:
        print_error(f"Archivo de LOV no encontrado: {path}")
        raise typer.Exit(1)
    except ValueError as e:
        print_error(f"LOV inválidas: {e}")
        raise typer.Exit(1)


def load_record_or_exit(path: Path) -> dict[str, Any]:
    """Lee un registro JSON; ante error imprime el mensaje y termina."""
    try:
        return load_record(path)
    except (FileNotFoundError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1)


def warn_unresolved_lovs(fields: list[FieldSchema], registry: LovRegistry) -> None:
    """Advierte de campos enumerables sin LOV resoluble."""
    missing = check_lov_references(fields, registry)
    if missing:
        print_warning(f"Campos sin LOV resoluble (se mostrará el valor crudo): {', '.join(missing)}")
