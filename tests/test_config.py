import pytest

from deepsec_render import Err, Ok, TraceLevel
from deepsec_render.config import Settings

VARS = ("LOG_LEVEL", "INDENT", "TRACE_LEVEL", "MAX_NESTING")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for var in VARS:
        monkeypatch.delenv(f"DEEPSEC_RENDER_{var}", raising=False)


def test_defaults() -> None:
    assert Settings.from_env() == Ok(Settings())
    assert Settings().indent == "   "


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEEPSEC_RENDER_LOG_LEVEL", "debug")
    monkeypatch.setenv("DEEPSEC_RENDER_INDENT", "2")
    monkeypatch.setenv("DEEPSEC_RENDER_TRACE_LEVEL", "ALL")
    monkeypatch.setenv("DEEPSEC_RENDER_MAX_NESTING", "50")
    match Settings.from_env():
        case Ok(settings):
            assert settings.log_level == "DEBUG"
            assert settings.indent == "  "
            assert settings.trace_level is TraceLevel.ALL
            assert settings.max_nesting == 50
        case Err(e):
            raise AssertionError(f"unexpected error: {e}")


@pytest.mark.parametrize(
    "var, value",
    [
        ("LOG_LEVEL", "loud"),
        ("INDENT", "wide"),
        ("INDENT", "-1"),
        ("TRACE_LEVEL", "verbose"),
        ("MAX_NESTING", "0"),
    ],
)
def test_invalid_values(monkeypatch: pytest.MonkeyPatch, var: str, value: str) -> None:
    monkeypatch.setenv(f"DEEPSEC_RENDER_{var}", value)
    assert isinstance(Settings.from_env(), Err)
