"""Motores de validación y formateo de campos."""

from leadform.core.validation import (
    FailureKind,
    ValidationFailure,
    failures_by_field,
    is_empty,
    is_valid_email,
    is_valid_phone,
    parse_date,
    parse_number,
    validate_field,
    validate_record,
)

from leadform.core.formatting import (
    PLACEHOLDER,
    format_plain_number,
    format_record,
    format_value,
    has_value,
    resolve_label,
)

__all__ = [
    # Validación
    "FailureKind",
    "ValidationFailure",
    "failures_by_field",
    "is_empty",
    "is_valid_email",
    "is_valid_phone",
    "parse_date",
    "parse_number",
    "validate_field",
    "validate_record",
    # Formateo
    "PLACEHOLDER",
    "format_plain_number",
    "format_record",
    "format_value",
    "has_value",
    "resolve_label",
]
