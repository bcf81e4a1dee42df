"""
Estado de interacción del formulario de registro.

Orquesta el motor de validación a medida que cambian los valores,
al salir de cada campo y al enviar.
"""

from .models import (
    FieldStatus,
    SubmitOutcome,
    SubmitStatus,
)
from .state import FormState, SubmitHandler

__all__ = [
    "FieldStatus",
    "SubmitOutcome",
    "SubmitStatus",
    "FormState",
    "SubmitHandler",
]
