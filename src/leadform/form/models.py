"""
Modelos de datos para el estado del formulario.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from leadform.core.validation import ValidationFailure


class FieldStatus(Enum):
    """Estado de un campo."""
    EMPTY = "empty"
    FILLED = "filled"
    INVALID = "invalid"
    OPTIONAL = "optional"


class SubmitStatus(Enum):
    """Resultado de un intento de envío."""
    INVALID = "invalid"  # Hubo fallas de validación, no se envió
    SUBMITTED = "submitted"  # El colaborador aceptó el registro
    REJECTED = "rejected"  # El colaborador devolvió False


@dataclass
class SubmitOutcome:
    """Resultado de FormState.submit()."""
    status: SubmitStatus
    failures: List[ValidationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == SubmitStatus.SUBMITTED
