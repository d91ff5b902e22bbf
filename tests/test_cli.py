"""Tests for the psl-lite command line."""

import io
import json

import pytest

from psl_lite.cli import EXIT_CLASSIFICATION_ERROR, EXIT_RULESET_ERROR, main


def _run(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    out, err = capsys.readouterr()
    return exc_info.value.code, out, err


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PSL_LITE_RULESET", raising=False)
    monkeypatch.delenv("PSL_LITE_MAX_WORKERS", raising=False)


def test_no_command_prints_help(capsys):
    code, out, _ = _run([], capsys)
    assert code == 0
    assert "psl-lite" in out


def test_parts(capsys):
    code, out, _ = _run(["parts", "support@billing.techcorp.com"], capsys)
    assert code == 0
    record = json.loads(out)
    assert record["registeredDomain"] == "techcorp.com"
    assert record["isICANN"] is True


def test_domain(capsys):
    code, out, _ = _run(["domain", "john@billing.acmecompany.com", "a@techcorp.co.uk"], capsys)
    assert code == 0
    assert out.splitlines() == ["acmecompany.com", "techcorp.co.uk"]


def test_domain_error_exit_code(capsys):
    code, out, err = _run(["domain", "test@localhost", "ok@example.com"], capsys)
    assert code == EXIT_CLASSIFICATION_ERROR
    assert out.splitlines() == ["example.com"]
    assert "Invalid domain: localhost" in err


def test_suffix(capsys):
    code, out, _ = _run(["suffix", "admin@business.com.au"], capsys)
    assert code == 0
    assert out.strip() == "com.au"


def test_valid(capsys):
    code, out, _ = _run(["valid", "user@acmecompany.com", "test@localhost"], capsys)
    assert code == 0
    assert out.splitlines() == ["user@acmecompany.com\ttrue", "test@localhost\tfalse"]


def test_batch_args(capsys):
    argv = ["batch", "user@acmecompany.com", "support@mail.acmecompany.com", "admin@techcorp.co.uk"]
    code, out, _ = _run(argv, capsys)
    assert code == 0
    assert out.splitlines() == ["acmecompany.com", "techcorp.co.uk"]


def test_batch_all_with_workers(capsys):
    argv = ["batch", "--all", "--workers", "4", "a@x.com", "b@x.com"]
    code, out, _ = _run(argv, capsys)
    assert code == 0
    assert out.splitlines() == ["x.com", "x.com"]


def test_batch_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a@x.com\n\nb@y.co.uk\na@x.com\n"))
    code, out, _ = _run(["batch"], capsys)
    assert code == 0
    assert out.splitlines() == ["x.com", "y.co.uk"]


def test_custom_ruleset(tmp_path, capsys):
    path = tmp_path / "psl.dat"
    path.write_text("*.foo\n!bar.foo\n", encoding="utf-8")
    code, out, _ = _run(["--ruleset", str(path), "suffix", "bar.foo"], capsys)
    assert code == 0
    assert out.strip() == "foo"


def test_ruleset_from_env(tmp_path, capsys, monkeypatch):
    path = tmp_path / "psl.dat"
    path.write_text("test\n", encoding="utf-8")
    monkeypatch.setenv("PSL_LITE_RULESET", str(path))
    code, out, _ = _run(["domain", "www.example.test"], capsys)
    assert code == 0
    assert out.strip() == "example.test"


def test_missing_ruleset(tmp_path, capsys):
    code, _, err = _run(["--ruleset", str(tmp_path / "nope.dat"), "domain", "x.com"], capsys)
    assert code == EXIT_RULESET_ERROR
    assert "error" in err
