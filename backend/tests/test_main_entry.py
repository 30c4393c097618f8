"""
Tests for backend/main.py
"""
import importlib.util
import os
import subprocess
import sys
from pathlib import Path

MAIN_PATH = Path(__file__).parent.parent / "main.py"


def load_main_module():
    spec = importlib.util.spec_from_file_location("uptime_main", MAIN_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_main_runs_with_settings_from_env(monkeypatch, capsys):
    monkeypatch.setenv("UPTIME_STEPS", "1")
    monkeypatch.setenv("UPTIME_DELAY_MS", "1")
    monkeypatch.setenv("UPTIME_COLOR", "false")

    rc = load_main_module().main([])

    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "Hello world!",
        "I depend on a third party library, see?",
        "I've been up for 1 seconds",
        "Done",
    ]


def test_script_exits_2_on_invalid_environment():
    env = {k: v for k, v in os.environ.items() if not k.upper().startswith(("UPTIME_", "LOG_"))}
    env["UPTIME_STEPS"] = "0"

    result = subprocess.run(
        [sys.executable, str(MAIN_PATH)],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )

    assert result.returncode == 2
    assert "invalid configuration" in result.stderr
    assert "Traceback" not in result.stderr
    assert result.stdout == ""
