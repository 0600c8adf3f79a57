"""Unit tests for the validate command."""

import json

import pytest
from click.testing import CliRunner

from record_validation.cli.commands.validate import validate_record

TODAY = ["--today", "2024-06-15"]


class TestValidateCommand:
    """Test suite for the validate command."""

    @pytest.fixture
    def runner(self):
        """Create a Click CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def write_record(self, tmp_path):
        """Write a payload to a JSON file and return its path."""

        def _write(payload, name="record.json"):
            path = tmp_path / name
            path.write_text(
                payload if isinstance(payload, str) else json.dumps(payload)
            )
            return str(path)

        return _write

    def test_valid_employee(self, runner, write_record, employee_payload):
        """Test a valid employee exits 0."""
        result = runner.invoke(
            validate_record, ["employee", write_record(employee_payload), *TODAY]
        )

        assert result.exit_code == 0
        assert "Valid employee record" in result.output

    def test_invalid_employee(self, runner, write_record, employee_payload):
        """Test an invalid employee lists violations and exits 3."""
        payload = {**employee_payload, "name": "Short", "phone": "12"}

        result = runner.invoke(validate_record, ["employee", write_record(payload), *TODAY])

        assert result.exit_code == 3
        assert "LengthOutOfRange" in result.output
        assert "InvalidFormat" in result.output
        assert "2 violation(s)" in result.output

    def test_reference_date_changes_tier(self, runner, write_record):
        """Test --today moves the employee across the senior boundary."""
        path = write_record(
            {"name": "John Smithson", "dateOfBirth": "1990-01-01", "hourlySalary": 60}
        )

        junior = runner.invoke(validate_record, ["employee", path, "--today", "2019-06-01"])
        senior = runner.invoke(validate_record, ["employee", path, "--today", "2024-06-15"])

        assert junior.exit_code == 0
        assert senior.exit_code == 3
        assert "SalaryTierViolation" in senior.output

    def test_json_output(self, runner, write_record):
        """Test JSON output carries every violation."""
        path = write_record({"name": "Short", "hourlySalary": 10})

        result = runner.invoke(
            validate_record, ["staff", path, "--output", "json", *TODAY]
        )

        body = json.loads(result.output)
        assert result.exit_code == 3
        assert body["recordType"] == "staff"
        assert body["valid"] is False
        assert [v["kind"] for v in body["violations"]] == [
            "LengthOutOfRange",
            "OutOfRange",
        ]

    def test_reads_stdin(self, runner, staff_payload):
        """Test the record is read from stdin by default."""
        result = runner.invoke(
            validate_record, ["staff", "--output", "json"], input=json.dumps(staff_payload)
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["valid"] is True

    def test_record_type_case_insensitive(self, runner, write_record, staff_payload):
        """Test the record type is matched case-insensitively."""
        result = runner.invoke(validate_record, ["STAFF", write_record(staff_payload)])

        assert result.exit_code == 0

    def test_unparseable_field(self, runner, write_record, employee_payload):
        """Test type errors are reported as violations."""
        payload = {**employee_payload, "dateOfBirth": "soon"}

        result = runner.invoke(
            validate_record, ["employee", write_record(payload), "--output", "json"]
        )

        body = json.loads(result.output)
        assert result.exit_code == 3
        assert body["violations"][0]["field"] == "dateOfBirth"
        assert body["violations"][0]["kind"] == "InvalidFormat"

    @pytest.mark.parametrize(
        "record_type, field, value",
        [
            ("employee", "dateOfBirth", 946684800),
            ("employee", "hourlySalary", "250"),
            ("staff", "hourlySalary", True),
        ],
    )
    def test_wrongly_typed_values_not_coerced(
        self,
        runner,
        write_record,
        employee_payload,
        staff_payload,
        record_type,
        field,
        value,
    ):
        """Test JSON values of the wrong type are InvalidFormat, not converted."""
        base = employee_payload if record_type == "employee" else staff_payload
        payload = {**base, field: value}

        result = runner.invoke(
            validate_record,
            [record_type, write_record(payload), "--output", "json", *TODAY],
        )

        body = json.loads(result.output)
        assert result.exit_code == 3
        assert [(v["field"], v["kind"]) for v in body["violations"]] == [
            (field, "InvalidFormat")
        ]

    def test_invalid_json(self, runner, write_record):
        """Test malformed JSON exits with the input error code."""
        result = runner.invoke(validate_record, ["staff", write_record("{not json")])

        assert result.exit_code == 2
        assert "Input Error" in result.output

    def test_batch_rejected(self, runner, write_record, staff_payload):
        """Test a JSON array is refused."""
        result = runner.invoke(validate_record, ["staff", write_record([staff_payload])])

        assert result.exit_code == 2
        assert "Expected a JSON object" in result.output

    def test_unknown_record_type(self, runner, write_record, staff_payload):
        """Test unknown record types are rejected by click."""
        result = runner.invoke(
            validate_record, ["contractor", write_record(staff_payload)]
        )

        assert result.exit_code != 0
