"""
Shared fixtures: every test starts from default settings.
"""
import pytest

from core.config import reset_settings

SETTINGS_ENV_VARS = [
    "APP_NAME",
    "LOG_LEVEL",
    "INPUT_FILE",
    "STOP_ON_MALFORMED",
    "MAX_RECEIVED",
    "MAX_RETURNED",
    "DENOMINATIONS",
    "EXPORT_DIR",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear settings env vars and the settings singleton around each test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def transaction_file(tmp_path):
    """Write lines to a transaction file and return its path."""
    def _write(*lines):
        path = tmp_path / "BankTransactions.txt"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)
    return _write
