from __future__ import annotations

import json

import pytest

from spendnote import cli, config


@pytest.fixture(autouse=True)
def _no_llm(monkeypatch):
    monkeypatch.setattr(config, "LLM_ENABLED", False)


def _run(capsys, argv: list[str]) -> tuple[int, dict]:
    code = cli.main(argv)
    out = capsys.readouterr().out.strip()
    return code, json.loads(out)


def test_parse_success(capsys) -> None:
    code, payload = _run(capsys, ["parse", "cafe 45k", "--language", "vi", "--currency", "VND", "--no-llm"])

    assert code == 0
    assert payload["status"] == "ok"
    assert payload["source"] == "local"
    assert payload["transaction"]["amount"] == 45000
    assert payload["transaction"]["category"] == "Ăn uống"


def test_parse_keeps_unicode_unescaped(capsys) -> None:
    cli.main(["parse", "lương 20tr", "--language", "vi", "--no-llm"])
    out = capsys.readouterr().out
    assert "Thu nhập" in out


def test_parse_with_type_mode_and_date(capsys) -> None:
    code, payload = _run(
        capsys,
        ["parse", "ăn trưa 60k", "--type", "income", "--mode", "voice", "--date", "2026-02-01", "--no-llm"],
    )

    assert code == 0
    tx = payload["transaction"]
    assert tx["type"] == "income"
    assert tx["inputMode"] == "voice"
    assert tx["date"] == "2026-02-01"


def test_parse_error_exit_code(capsys) -> None:
    code, payload = _run(capsys, ["parse", "lunch with friends", "--language", "en", "--no-llm"])

    assert code == 1
    assert payload["status"] == "error"
    assert payload["error"]["reason"] == "no_amount_found"


def test_invalid_date_rejected(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["parse", "cafe 45k", "--date", "15/01/2026"])
    assert exc_info.value.code == 2
