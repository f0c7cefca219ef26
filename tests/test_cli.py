import json
import logging

from click.testing import CliRunner

from share_recovery.cli import main


def document(n=5, k=3, corrupt=True):
    return {
        "keys": {"n": n, "k": k},
        "1": {"base": "10", "value": "2"},
        "2": {"base": "2", "value": "101"},
        "3": {"base": "10", "value": "11" if corrupt else "10"},
        "4": {"base": "16", "value": "11"},
        "5": {"base": "36", "value": "Q"},
    }
def test_prints_secret_and_wrong_shares(write_document):
    path = write_document(document())
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0, result.output
    assert "Secret: 1" in result.output
    assert "Wrong shares: 3" in result.output


def test_no_wrong_shares(write_document):
    path = write_document(document(corrupt=False))
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0, result.output
    assert "Wrong shares: None" in result.output


def test_json_output(write_document):
    path = write_document(document())
    result = CliRunner().invoke(main, [str(path), "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["secret"] == "1"
    assert payload["wrong_shares"] == ["3"]
    assert payload["subset"] == ["1", "2", "4"]


def test_threshold_override(write_document):
    path = write_document(document(k=9))
    result = CliRunner().invoke(main, [str(path), "-k", "3"])
    assert result.exit_code == 0, result.output
    assert "Secret: 1" in result.output


def test_default_input_path(write_document, monkeypatch):
    path = write_document(document())
    monkeypatch.chdir(path.parent)
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0, result.output
    assert "Secret: 1" in result.output


def test_unsatisfiable_threshold_fails_without_secret(write_document):
    path = write_document(document(k=6))
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert "Secret:" not in result.output
    assert "threshold k=6" in result.output


def test_malformed_document_fails(write_document):
    data = document()
    data["2"]["value"] = "102"
    path = write_document(data)
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 1
    assert "Secret:" not in result.output
    assert "'2'" in result.output


def test_count_mismatch_warns_and_recovers(write_document, caplog):
    path = write_document(document(n=7))
    with caplog.at_level(logging.WARNING, logger="share_recovery"):
        result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0, result.output
    assert "Secret: 1" in result.output
    assert any("actual share count (5) != n (7)" in record.getMessage() for record in caplog.records)
