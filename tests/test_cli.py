"""
Tests para la CLI - Comandos fields, lov, validate, show y capture.
"""

import json

import pytest
from typer.testing import CliRunner

from leadform.cli import app
from leadform.cli.capture import CANCELLED, run_capture
from leadform.form import FormState, SubmitStatus
from leadform.store import load_record


runner = CliRunner()


@pytest.fixture
def lead_file(tmp_path, sample_lead):
    path = tmp_path / "lead.json"
    path.write_text(json.dumps(sample_lead), encoding="utf-8")
    return path


def scripted_prompter(answers):
    """Prompter que responde desde un dict y registra las preguntas."""
    asked = []

    def prompt(fld, current, registry):
        asked.append(fld.key)
        value = answers.get(fld.key, current)
        if hasattr(value, "__next__"):
            # Respuestas sucesivas para el mismo campo
            return next(value)
        return value

    prompt.asked = asked
    return prompt


class TestFieldsCommand:
    """Tests para comando fields."""

    def test_bundled_schema(self):
        result = runner.invoke(app, ["fields"])
        assert result.exit_code == 0
        assert "company_name" in result.stdout
        assert "COUNTRY_LOV" in result.stdout
        assert "0..100000" in result.stdout

    def test_hidden_fields(self, tmp_path):
        """Test --all incluye campos ocultos."""
        path = tmp_path / "fields.json"
        path.write_text(json.dumps([
            {"columnName": "shown_field", "displayName": "Shown", "dataType": "TEXT"},
            {"columnName": "hidden_field", "displayName": "Hidden", "dataType": "TEXT", "visible": False},
        ]))
        result = runner.invoke(app, ["fields", "--schema", str(path)])
        assert "shown_field" in result.stdout
        assert "hidden_field" not in result.stdout

        result = runner.invoke(app, ["fields", "--schema", str(path), "--all"])
        assert "hidden_field" in result.stdout

    def test_missing_schema(self, tmp_path):
        result = runner.invoke(app, ["fields", "--schema", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Esquema no encontrado" in result.stdout

    def test_invalid_schema(self, tmp_path):
        path = tmp_path / "fields.json"
        path.write_text(json.dumps({"fields": "nope"}))
        result = runner.invoke(app, ["fields", "--schema", str(path)])
        assert result.exit_code == 1

    def test_schema_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "fields.json"
        path.write_text(json.dumps([{"columnName": "env_field", "displayName": "Env", "dataType": "TEXT"}]))
        monkeypatch.setenv("LEADFORM_SCHEMA", str(path))
        result = runner.invoke(app, ["fields"])
        assert "env_field" in result.stdout


class TestLovCommand:
    """Tests para comando lov."""

    def test_list_codes(self):
        result = runner.invoke(app, ["lov"])
        assert result.exit_code == 0
        assert "SALES_REP_LOV" in result.stdout
        assert "LEAD_SOURCE_LOV" in result.stdout

    def test_single_code(self):
        result = runner.invoke(app, ["lov", "COUNTRY_LOV"])
        assert result.exit_code == 0
        assert "Singapore" in result.stdout

    def test_unknown_code(self):
        result = runner.invoke(app, ["lov", "NOPE_LOV"])
        assert result.exit_code == 1
        assert "LOV no encontrada: NOPE_LOV" in result.stdout


class TestValidateCommand:
    """Tests para comando validate."""

    def test_valid(self, lead_file):
        result = runner.invoke(app, ["validate", str(lead_file)])
        assert result.exit_code == 0
        assert "Registro válido" in result.stdout

    def test_invalid(self, tmp_path, sample_lead):
        sample_lead["email"] = "nope"
        sample_lead["company_name"] = ""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(sample_lead))

        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Company Name: Company Name is required" in result.stdout
        assert "Email: Invalid email format" in result.stdout
        assert "2 campo(s) con errores" in result.stdout

    def test_missing_record(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Registro no encontrado" in result.stdout


class TestShowCommand:
    """Tests para comando show."""

    def test_formatted_values(self, lead_file):
        result = runner.invoke(app, ["show", str(lead_file)])
        assert result.exit_code == 0
        assert "Lead Details" in result.stdout
        assert "Singapore" in result.stdout
        assert "Freight Forwarding, 3PL" in result.stdout
        assert "Jan 15, 2024" in result.stdout
        assert "1250.50" in result.stdout

    def test_missing_values(self, lead_file):
        """Test campos vacíos muestran 'Not provided'."""
        result = runner.invoke(app, ["show", str(lead_file), "--title", "Lead"])
        assert "Not provided" in result.stdout
        assert "Shipments per month" in result.stdout


class TestRunCapture:
    """Tests de run_capture con un prompter programado."""

    def test_submits_record(self, name_age_fields, lov_registry):
        received = []
        state = FormState.create(name_age_fields)
        prompt = scripted_prompter({"name": "Ann", "age": "30"})

        status = run_capture(state, lov_registry, received.append, prompt=prompt)

        assert status == SubmitStatus.SUBMITTED
        assert received == [{"name": "Ann", "age": "30"}]
        assert prompt.asked == ["name", "age"]

    def test_reprompts_invalid_field(self, name_age_fields, lov_registry, capsys):
        """Test un valor inválido se vuelve a pedir."""
        received = []
        state = FormState.create(name_age_fields)
        prompt = scripted_prompter({"name": "Ann", "age": iter(["-5", "7"])})

        status = run_capture(state, lov_registry, received.append, prompt=prompt)

        assert status == SubmitStatus.SUBMITTED
        assert prompt.asked == ["name", "age", "age"]
        assert received == [{"name": "Ann", "age": "7"}]
        assert "Age must be at least 0" in capsys.readouterr().out

    def test_cancel(self, name_age_fields, lov_registry):
        state = FormState.create(name_age_fields)
        status = run_capture(state, lov_registry, lambda r: True, prompt=lambda f, c, r: CANCELLED)
        assert status is None
        assert not state.submit_attempted

    def test_locked_field_with_error(self, make_field, lov_registry, capsys):
        """Test campo no editable con error termina sin enviar."""
        fields = [
            make_field(column_name="code", display_name="Code", required=True, editable=False),
            make_field(column_name="city", display_name="City"),
        ]
        received = []
        state = FormState.create(fields)

        status = run_capture(state, lov_registry, received.append, prompt=scripted_prompter({"city": "Oslo"}))

        assert status == SubmitStatus.INVALID
        assert received == []
        assert "Campos no editables con errores: Code" in capsys.readouterr().out


class TestCaptureCommand:
    """Tests para comando capture."""

    def test_capture_new_lead(self, tmp_path, sample_lead, monkeypatch):
        answers = {k: v for k, v in sample_lead.items() if k != "lead_id"}
        monkeypatch.setattr("leadform.cli.capture.prompt_field", scripted_prompter(answers))
        out_dir = tmp_path / "out"

        result = runner.invoke(app, ["capture", "-o", str(out_dir)])

        assert result.exit_code == 0, result.stdout
        assert "Lead guardado" in result.stdout
        saved = list(out_dir.glob("lead_*.json"))
        assert len(saved) == 1
        record = load_record(saved[0])
        assert record["company_name"] == "Acme Logistics"
        assert record["service_line_interested"] == ["FREIGHT_FORWARDING", "3PL"]

    def test_capture_edit_default_dir(self, lead_file, tmp_path, monkeypatch):
        """Test edición guarda en LEADFORM_HOME/leads."""
        monkeypatch.setattr("leadform.cli.capture.prompt_field", scripted_prompter({"city": "Jurong"}))

        result = runner.invoke(app, ["capture", "--initial", str(lead_file)])

        assert result.exit_code == 0, result.stdout
        record = load_record(tmp_path / "home" / "leads" / "lead_L-0001.json")
        assert record["city"] == "Jurong"

    def test_capture_cancelled(self, tmp_path, monkeypatch):
        monkeypatch.setattr("leadform.cli.capture.prompt_field", lambda f, c, r: CANCELLED)
        result = runner.invoke(app, ["capture", "-o", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Captura cancelada" in result.stdout
        assert not (tmp_path / "out").exists()


class TestVerbose:
    """Tests de la opción global --verbose."""

    def test_verbose_sets_debug(self):
        import logging

        result = runner.invoke(app, ["--verbose", "lov"])
        assert result.exit_code == 0
        assert logging.getLogger("leadform").level == logging.DEBUG

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LEADFORM_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["lov"])
        assert result.exit_code == 1
        assert "Configuración inválida" in result.stdout

    def test_theme_option(self):
        """Test --theme cambia la paleta activa."""
        from leadform.cli.theme import THEME_MINIMAL, get_palette

        result = runner.invoke(app, ["--theme", "minimal", "lov"])
        assert result.exit_code == 0
        assert get_palette() is THEME_MINIMAL

    def test_hint_style_follows_palette(self):
        """Test los mensajes informativos usan el color hint del tema."""
        from leadform.cli.theme import THEME_MINIMAL, CLITheme, ThemeName, get_console

        CLITheme.set_theme(ThemeName.MINIMAL)
        style = get_console().get_style("form.hint")
        assert style.color.name == THEME_MINIMAL.hint


class TestCaptureSaveError:
    """Tests de capture cuando el registro no se puede guardar."""

    def test_path_like_lead_id(self, tmp_path, sample_lead, monkeypatch):
        sample_lead["lead_id"] = "L/2024/001"
        path = tmp_path / "lead.json"
        path.write_text(json.dumps(sample_lead), encoding="utf-8")
        monkeypatch.setattr("leadform.cli.capture.prompt_field", scripted_prompter({}))

        result = runner.invoke(app, ["capture", "--initial", str(path), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "No se pudo guardar el lead" in result.stdout
        assert result.exception is None or isinstance(result.exception, SystemExit)
