from unittest.mock import patch

from coviddash.cli import _parse_args, main


def test_parse_args_defaults_to_port_4040():
    args = _parse_args([])

    assert args.port == 4040
    assert args.host == "0.0.0.0"
    assert args.log_level == "INFO"


def test_parse_args_reads_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    assert _parse_args([]).port == 8080


def test_parse_args_accepts_explicit_port_and_level():
    args = _parse_args(["--port", "5050", "--log-level", "debug"])

    assert args.port == 5050
    assert args.log_level == "DEBUG"


def test_main_starts_uvicorn_with_selected_port():
    with patch("coviddash.cli.uvicorn.run") as run_mock:
        assert main(["--port", "5151"]) == 0

    run_mock.assert_called_once()
    assert run_mock.call_args.args == ("coviddash.main:app",)
    assert run_mock.call_args.kwargs["port"] == 5151
    assert run_mock.call_args.kwargs["log_level"] == "info"
