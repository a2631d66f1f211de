from pathlib import Path

import pytest

from deepsec_render.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for var in ("LOG_LEVEL", "INDENT", "TRACE_LEVEL", "MAX_NESTING"):
        monkeypatch.delenv(f"DEEPSEC_RENDER_{var}", raising=False)


def test_process(query_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["process", str(query_file)]) == 0
    out = capsys.readouterr().out
    assert out == (
        "// Process 1\nnew k;\nout(c,senc(k,k))\n"
        "// Process 2\nnew k_1;\nin(c,x);\nout(c,(x,k_1))\n"
    )


def test_trace_wrapped(query_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["trace", str(query_file), "--wrap", "--level", "all"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["out(c(),ax_1);", "tau;", "in(c(),senc(ax_1,#n));", ""]


def test_trace_without_attack(
    equivalent_query_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["trace", str(equivalent_query_file)]) == 0
    assert "No attack trace" in capsys.readouterr().err


def test_report_with_indent(query_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--indent", "1", "report", str(query_file)]) == 0
    assert "Not trace equivalent" in capsys.readouterr().out


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["process", str(tmp_path / "nope.json")]) == 1
    assert "Could not load" in capsys.readouterr().err


def test_invalid_env(
    query_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("DEEPSEC_RENDER_TRACE_LEVEL", "verbose")
    assert main(["trace", str(query_file)]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_no_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
