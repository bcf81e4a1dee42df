"""Configuración de pytest para tests de leadform."""

import logging

import pytest

from leadform.config import DataType, FieldSchema
from leadform.data import LovRegistry, load_schema


@pytest.fixture
def lov_registry():
    """Registro de LOV fabricado para tests."""
    return LovRegistry.from_mapping({
        "LEAD_STATUS_LOV": [
            {"value": "NEW", "label": "New"},
            {"value": "CONTACTED", "label": "Contacted"},
        ],
        "SERVICE_LINE_INTERESTED_LOV": [
            {"value": "FREIGHT_FORWARDING", "label": "Freight Forwarding"},
            {"value": "3PL", "label": "3PL"},
        ],
        "SALES_REP_LOV": [
            {"value": "jchen", "label": "Jamie Chen"},
        ],
    })


@pytest.fixture
def make_field():
    """Fábrica de FieldSchema con valores por defecto."""
    def _make(**kwargs) -> FieldSchema:
        params = {
            "column_name": "field",
            "display_name": "Field",
            "data_type": DataType.TEXT,
        }
        params.update(kwargs)
        return FieldSchema(**params)
    return _make


@pytest.fixture
def name_age_fields(make_field):
    """Esquema mínimo: nombre requerido y edad opcional con mínimo 0."""
    return [
        make_field(column_name="name", display_name="Name", required=True, display_order=1),
        make_field(
            column_name="age", display_name="Age", data_type=DataType.NUMBER,
            min_value="0", display_order=2,
        ),
    ]


@pytest.fixture
def lead_fields():
    """Esquema de lead incluido en el paquete."""
    return load_schema()


@pytest.fixture
def sample_lead():
    """Lead completo y válido según el esquema incluido."""
    return {
        "lead_id": "L-0001",
        "company_name": "Acme Logistics",
        "country": "SG",
        "city": "Singapore",
        "primary_contact_name": "Ann Tan",
        "email": "ann@acme.sg",
        "phone": "+65 6123 4567",
        "lead_status": "NEW",
        "assigned_sales_rep": "jchen",
        "lead_source": "REFERRAL",
        "service_line_interested": ["FREIGHT_FORWARDING", "3PL"],
        "estimated_monthly_volume": "1250.5",
        "expected_start_date": "2024-01-15",
        "notes": None,
    }


@pytest.fixture(autouse=True)
def fresh_cli_state(monkeypatch, tmp_path):
    """Aísla la configuración y la consola de la CLI entre tests."""
    from leadform.cli.common import reset_settings
    from leadform.cli.theme.palette import CLITheme, ThemeName

    for var in ("LEADFORM_SCHEMA", "LEADFORM_LOV", "LEADFORM_OUTPUT", "LEADFORM_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LEADFORM_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("COLUMNS", "200")
    reset_settings()
    CLITheme.set_theme(ThemeName.DEFAULT)
    yield
    reset_settings()
    CLITheme.set_theme(ThemeName.DEFAULT)
    logger = logging.getLogger("leadform")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
