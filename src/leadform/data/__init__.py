"""
Módulo de datos: esquema de campos y listas de valores.

Incluye el esquema de lead y las LOV de ejemplo del CRM.
"""

from leadform.data.lov_registry import (
    DEFAULT_LOV_FILE,
    LovOption,
    LovRegistry,
)
from leadform.data.schema_loader import (
    DEFAULT_SCHEMA_FILE,
    SchemaError,
    check_lov_references,
    load_schema,
    parse_schema,
    visible_fields,
)

__all__ = [
    "DEFAULT_LOV_FILE",
    "LovOption",
    "LovRegistry",
    "DEFAULT_SCHEMA_FILE",
    "SchemaError",
    "check_lov_references",
    "load_schema",
    "parse_schema",
    "visible_fields",
]
