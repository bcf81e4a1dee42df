"""
Formateo de valores crudos para mostrar.

Convierte el valor almacenado de un campo en un texto legible usando el
registro de LOV para los tipos enumerables. Ninguna rama lanza excepciones:
siempre hay un texto de respaldo.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from leadform.config import DataType, FieldSchema
from leadform.core.validation import is_empty, parse_date, parse_number
from leadform.data.lov_registry import LovRegistry

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"

# Abreviaturas fijas (no dependen del locale del proceso)
MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def has_value(value: Any) -> bool:
    """True si el valor no es None, "" ni una lista vacía."""
    return not is_empty(value)


def _as_text(value: Any) -> str:
    """Forma de texto plana de un valor."""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def format_plain_number(num: float) -> str:
    """
    Formatea un número sin decimales forzados.

    Los enteros se muestran sin parte decimal ("30", no "30.0").
    """
    if num.is_integer() and abs(num) < 1e21:
        return str(int(num))
    return repr(num)


def resolve_label(registry: Optional[LovRegistry], lov_code: Optional[str], value: Any) -> str:
    """
    Resuelve la etiqueta de un valor de LOV.

    Returns:
        La etiqueta registrada, o el valor crudo como texto si no se resuelve
    """
    label = registry.label_for(lov_code, value) if registry is not None else None
    return label if label else _as_text(value)


# =============================================================================
# Formateadores por tipo
# =============================================================================

def _format_text(fld: FieldSchema, value: Any, registry: Optional[LovRegistry]) -> str:
    return _as_text(value)


def _format_date(fld: FieldSchema, value: Any, registry: Optional[LovRegistry]) -> str:
    if value == "":
        return PLACEHOLDER
    d = parse_date(value)
    if d is None:
        return _as_text(value)
    return f"{MONTH_ABBR[d.month - 1]} {d.day}, {d.year}"


def _format_number(fld: FieldSchema, value: Any, registry: Optional[LovRegistry]) -> str:
    num = parse_number(value)
    if num is None:
        return _as_text(value)
    if fld.db_scale and fld.db_scale > 0:
        return f"{num:.{fld.db_scale}f}"
    return format_plain_number(num)


def _format_lov(fld: FieldSchema, value: Any, registry: Optional[LovRegistry]) -> str:
    return resolve_label(registry, fld.lov_code, value)


def _format_multiselect(fld: FieldSchema, value: Any, registry: Optional[LovRegistry]) -> str:
    if not isinstance(value, (list, tuple)):
        return _as_text(value)
    return ", ".join(resolve_label(registry, fld.lov_code, v) for v in value)


Formatter = Callable[[FieldSchema, Any, Optional[LovRegistry]], str]

_FORMATTERS: dict[DataType, Formatter] = {
    DataType.TEXT: _format_text,
    DataType.EMAIL: _format_text,
    DataType.PHONE: _format_text,
    DataType.NUMBER: _format_number,
    DataType.DATE: _format_date,
    DataType.DROPDOWN: _format_lov,
    DataType.MULTISELECT: _format_multiselect,
    DataType.USER: _format_lov,
    DataType.TEXTAREA: _format_text,
}

_missing = set(DataType) - set(_FORMATTERS)
if _missing:
    raise RuntimeError(f"Tipos sin formateador: {sorted(t.value for t in _missing)}")


# =============================================================================
# API pública
# =============================================================================

def format_value(
    fld: FieldSchema,
    value: Any,
    registry: Optional[LovRegistry] = None,
) -> str:
    """
    Formatea el valor de un campo para mostrar.

    Args:
        fld: Descriptor del campo
        value: Valor crudo
        registry: Registro de LOV para DROPDOWN, USER y MULTISELECT

    Returns:
        Texto legible; "-" si el valor es None
    """
    if value is None:
        return PLACEHOLDER

    formatter = _FORMATTERS.get(fld.data_type, _format_text)
    try:
        return formatter(fld, value, registry)
    except Exception:
        logger.warning(
            "No se pudo formatear %s=%r, se muestra el valor crudo",
            fld.key, value, exc_info=True,
        )
        try:
            return _as_text(value)
        except Exception:
            return repr(value)


def format_record(
    fields: Iterable[FieldSchema],
    record: Mapping[str, Any],
    registry: Optional[LovRegistry] = None,
    visible_only: bool = True,
) -> list[tuple[FieldSchema, str]]:
    """
    Formatea todos los campos de un registro.

    Returns:
        Lista de (campo, texto) en el orden del esquema
    """
    return [
        (fld, format_value(fld, record.get(fld.key), registry))
        for fld in fields
        if fld.visible or not visible_only
    ]
