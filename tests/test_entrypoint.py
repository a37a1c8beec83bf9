"""
test_entrypoint.py — Tests for todoapi/__main__.py

Called by: pytest
Depends on: todoapi/__main__.py, todoapi/config.py
"""

from unittest.mock import patch

from todoapi import __main__ as entrypoint


def test_main_runs_uvicorn_with_settings_bind():
    with patch("todoapi.__main__.uvicorn.run") as mock_run:
        entrypoint.main()

    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args == ("todoapi.main:app",)
    assert kwargs["host"] == entrypoint.settings.host
    assert kwargs["port"] == entrypoint.settings.port
    assert kwargs["log_config"] is None


def test_main_uses_configured_host_and_port():
    with patch.object(entrypoint.settings, "host", "127.0.0.1"), \
            patch.object(entrypoint.settings, "port", 9999), \
            patch("todoapi.__main__.uvicorn.run") as mock_run:
        entrypoint.main()

    assert mock_run.call_args.kwargs["host"] == "127.0.0.1"
    assert mock_run.call_args.kwargs["port"] == 9999
