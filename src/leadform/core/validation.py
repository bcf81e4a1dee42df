"""
Validación de valores de campos según su descriptor.

Funciones puras: dado un FieldSchema y un valor crudo, deciden si el valor
es aceptable y qué mensaje mostrar si no lo es. Nunca lanzan excepciones
por combinaciones de esquema/valor mal formadas.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from leadform.config import DataType, FieldSchema

logger = logging.getLogger(__name__)

# Dígitos solo ASCII (0-9); \s cubre también los espacios Unicode
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE = re.compile(r"[0-9\s\-+()]{7,}")

# Formatos de calendario aceptados además de ISO 8601
DATE_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%m/%d/%Y", "%Y/%m/%d")

_DATE_ADAPTER = TypeAdapter(date)
_DATETIME_ADAPTER = TypeAdapter(datetime)


class FailureKind(str, Enum):
    """Tipos de falla de validación."""
    REQUIRED_FIELD_MISSING = "required_field_missing"
    INVALID_FORMAT = "invalid_format"
    NUMBER_OUT_OF_RANGE = "number_out_of_range"
    NOT_A_NUMBER = "not_a_number"


@dataclass(frozen=True)
class ValidationFailure:
    """Rechazo de un valor, asociado a un campo y corregible por el usuario."""
    field: str
    message: str
    kind: FailureKind


# =============================================================================
# Helpers de parseo
# =============================================================================

def is_empty(value: Any) -> bool:
    """
    Indica si un valor cuenta como ausente.

    None, "" y secuencias vacías son ausencia; el número 0 es un valor presente.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def parse_number(value: Any) -> Optional[float]:
    """
    Convierte un valor a float.

    Returns:
        El número, o None si no es un número finito
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        num = float(value)
    elif isinstance(value, str):
        # float() acepta separadores "_" (1_000); aquí no son números
        if "_" in value:
            return None
        try:
            num = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(num):
        return None
    return num


def parse_date(value: Any) -> Optional[date]:
    """
    Convierte un valor a fecha de calendario.

    Acepta date, datetime, strings ISO (YYYY-MM-DD o fecha-hora ISO 8601)
    y los formatos de DATE_FORMATS ("Jan 5, 2025", "01/15/2024"...).

    Returns:
        La fecha, o None si no se puede interpretar
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return _DATE_ADAPTER.validate_python(text)
    except ValidationError:
        pass
    try:
        return _DATETIME_ADAPTER.validate_python(text).date()
    except ValidationError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email))


def is_valid_phone(phone: str) -> bool:
    """Al menos 7 caracteres entre dígitos, espacios, guiones, + y paréntesis."""
    return bool(PHONE_RE.fullmatch(phone))


def _parse_bound(fld: FieldSchema, bound: Optional[str]) -> Optional[float]:
    if not bound:
        return None
    num = parse_number(bound)
    if num is None:
        logger.warning("Límite no numérico ignorado en %s: %r", fld.key, bound)
    return num


# =============================================================================
# Validadores por tipo
# =============================================================================

def _failure(fld: FieldSchema, message: str, kind: FailureKind) -> ValidationFailure:
    return ValidationFailure(field=fld.key, message=message, kind=kind)


def _check_email(fld: FieldSchema, value: Any) -> Optional[ValidationFailure]:
    if isinstance(value, str) and not is_valid_email(value):
        return _failure(fld, "Invalid email format", FailureKind.INVALID_FORMAT)
    return None


def _check_phone(fld: FieldSchema, value: Any) -> Optional[ValidationFailure]:
    if isinstance(value, str) and not is_valid_phone(value):
        return _failure(fld, "Invalid phone format", FailureKind.INVALID_FORMAT)
    return None


def _check_number(fld: FieldSchema, value: Any) -> Optional[ValidationFailure]:
    num = parse_number(value)
    if num is None:
        return _failure(
            fld, f"{fld.label} must be a valid number", FailureKind.NOT_A_NUMBER
        )

    # min antes que max; solo se reporta la primera
    min_value = _parse_bound(fld, fld.min_value)
    if min_value is not None and num < min_value:
        return _failure(
            fld, f"{fld.label} must be at least {fld.min_value}",
            FailureKind.NUMBER_OUT_OF_RANGE,
        )
    max_value = _parse_bound(fld, fld.max_value)
    if max_value is not None and num > max_value:
        return _failure(
            fld, f"{fld.label} must not exceed {fld.max_value}",
            FailureKind.NUMBER_OUT_OF_RANGE,
        )
    return None


def _check_date(fld: FieldSchema, value: Any) -> Optional[ValidationFailure]:
    # Solo se juzgan strings; date/datetime ya son fechas válidas
    if isinstance(value, str) and parse_date(value) is None:
        return _failure(fld, "Invalid date format", FailureKind.INVALID_FORMAT)
    return None


def _no_check(fld: FieldSchema, value: Any) -> Optional[ValidationFailure]:
    # La pertenencia a la LOV la garantiza la capa de presentación
    return None


TypeCheck = Callable[[FieldSchema, Any], Optional[ValidationFailure]]

_TYPE_CHECKS: dict[DataType, TypeCheck] = {
    DataType.TEXT: _no_check,
    DataType.EMAIL: _check_email,
    DataType.PHONE: _check_phone,
    DataType.NUMBER: _check_number,
    DataType.DATE: _check_date,
    DataType.DROPDOWN: _no_check,
    DataType.MULTISELECT: _no_check,
    DataType.USER: _no_check,
    DataType.TEXTAREA: _no_check,
}

_missing = set(DataType) - set(_TYPE_CHECKS)
if _missing:
    raise RuntimeError(f"Tipos sin validador: {sorted(t.value for t in _missing)}")


# =============================================================================
# API pública
# =============================================================================

def validate_field(fld: FieldSchema, value: Any) -> Optional[ValidationFailure]:
    """
    Valida el valor de un campo.

    Orden: requerido, ausencia (un opcional vacío siempre es válido) y
    luego la regla del tipo. Se detiene en la primera falla.

    Args:
        fld: Descriptor del campo
        value: Valor crudo (escalar, o lista para MULTISELECT)

    Returns:
        ValidationFailure o None si el valor es aceptable
    """
    if fld.required and is_empty(value):
        failure = _failure(
            fld, f"{fld.label} is required", FailureKind.REQUIRED_FIELD_MISSING
        )
        logger.debug("%s: %s", fld.key, failure.message)
        return failure

    if is_empty(value):
        return None

    failure = _TYPE_CHECKS[fld.data_type](fld, value)
    if failure is not None:
        logger.debug("%s: %s", fld.key, failure.message)
    return failure


def validate_record(
    fields: Iterable[FieldSchema],
    record: Mapping[str, Any],
    visible_only: bool = True,
) -> list[ValidationFailure]:
    """
    Valida todos los campos de un registro.

    Args:
        fields: Esquema del registro
        record: Dict clave -> valor crudo (las claves ausentes valen None)
        visible_only: Si True, ignora los campos no visibles

    Returns:
        Todas las fallas, en el orden del esquema
    """
    failures = []
    for fld in fields:
        if visible_only and not fld.visible:
            continue
        failure = validate_field(fld, record.get(fld.key))
        if failure is not None:
            failures.append(failure)
    return failures


def failures_by_field(failures: Iterable[ValidationFailure]) -> dict[str, str]:
    """Mapa clave -> mensaje, como lo muestra el formulario."""
    return {f.field: f.message for f in failures}
