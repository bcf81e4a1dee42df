"""
Carga del esquema de campos desde JSON.

El esquema llega de una fuente externa ya validada; aquí solo se
deserializa, se ordena y se detectan claves duplicadas.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from leadform.config import FieldSchema
from leadform.data.lov_registry import LovRegistry

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_FILE = Path(__file__).parent / "lead_fields.json"


class SchemaError(ValueError):
    """Esquema de campos mal formado."""


def parse_schema(raw: Any) -> list[FieldSchema]:
    """
    Construye la lista de FieldSchema desde datos ya deserializados.

    Args:
        raw: Lista de descriptores o dict con clave "fields"

    Returns:
        Campos ordenados por display_order (estable ante empates)

    Raises:
        SchemaError: Si la estructura es inválida o hay claves repetidas
    """
    if isinstance(raw, dict):
        raw = raw.get("fields")
    if not isinstance(raw, list):
        raise SchemaError("El esquema debe ser una lista de campos o un objeto con 'fields'")

    fields = []
    for i, entry in enumerate(raw):
        try:
            fields.append(FieldSchema.model_validate(entry))
        except ValidationError as e:
            raise SchemaError(f"Campo #{i} inválido: {e}") from e

    seen = set()
    for fld in fields:
        if fld.key in seen:
            raise SchemaError(f"Clave de campo duplicada: {fld.key}")
        seen.add(fld.key)

    return sorted(fields, key=lambda f: f.display_order)


def load_schema(path: Optional[Path] = None) -> list[FieldSchema]:
    """
    Lee el esquema desde un archivo JSON.

    Args:
        path: Ruta al JSON; None usa el esquema de lead incluido

    Returns:
        Lista de FieldSchema ordenada
    """
    path = Path(path) if path is not None else DEFAULT_SCHEMA_FILE
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaError(f"JSON inválido en {path}: {e}") from e

    fields = parse_schema(raw)
    logger.debug("Esquema cargado desde %s: %d campos", path, len(fields))
    return fields


def visible_fields(fields: Iterable[FieldSchema]) -> list[FieldSchema]:
    """Filtra los campos visibles conservando el orden."""
    return [f for f in fields if f.visible]


def check_lov_references(
    fields: Iterable[FieldSchema],
    registry: LovRegistry,
) -> list[str]:
    """
    Lista los campos enumerables cuya LOV no se puede resolver.

    No bloquea nada: el formateo degrada al valor crudo.
    """
    missing = []
    for fld in fields:
        if fld.uses_lov and (not fld.lov_code or fld.lov_code not in registry):
            missing.append(fld.key)
    if missing:
        logger.warning("Campos con LOV no resuelta: %s", ", ".join(missing))
    return missing
