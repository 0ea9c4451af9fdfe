"""Tests for the command-line driver."""

import json
import logging

import pytest

from sourcedocs import RecordError
from sourcedocs.cli import load_records, main


@pytest.fixture
def records_file(tmp_path, full_record):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([full_record, {"name": "bare"}]))
    return path


class TestLoadRecords:
    def test_loads_list(self, records_file):
        records = load_records(records_file)
        assert [r["name"] for r in records] == ["fetch(_:)", "bare"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(RecordError):
            load_records(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordError):
            load_records(tmp_path / "missing.json")

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text('{"name": "x"}')
        with pytest.raises(RecordError, match="expected a JSON list"):
            load_records(path)

    def test_non_object_record(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text('[{"name": "x"}, 3]')
        with pytest.raises(RecordError, match="record 1"):
            load_records(path)


class TestMain:
    def test_prints_markdown_and_coverage(self, records_file, capsys):
        assert main([str(records_file)]) == 0

        out, err = capsys.readouterr()
        assert "### fetch(_:)" in out
        assert "### bare" in out
        assert "\n---\n" in out
        assert "Coverage: 50% of 2 symbols" in err

    def test_writes_output_file(self, records_file, tmp_path, capsys):
        output = tmp_path / "api.md"
        assert main([str(records_file), "--output", str(output)]) == 0

        assert output.read_text().startswith("### fetch(_:)")
        out, _ = capsys.readouterr()
        assert out == ""

    def test_strict_fails_on_undocumented(self, records_file, capsys):
        assert main([str(records_file), "--strict"]) == 1

        _, err = capsys.readouterr()
        assert "bare: undocumented" in err

    def test_malformed_markup_warns_once(self, tmp_path, caplog, capsys):
        path = tmp_path / "records.json"
        path.write_text(
            json.dumps([{"name": "f()", "docDiscussionXML": "<Discussion><Para>broken"}])
        )
        with caplog.at_level(logging.WARNING):
            assert main([str(path)]) == 0

        warnings = [r for r in caplog.records if "Skipping discussion" in r.getMessage()]
        assert len(warnings) == 1
        _, err = capsys.readouterr()
        assert "Coverage: 0% of 1 symbols" in err

    def test_bad_input_exits_with_error(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("[")
        assert main([str(path)]) == 1

        _, err = capsys.readouterr()
        assert "✗" in err
