# tests/conftest.py
import logging
from pathlib import Path
import sys

import pytest

# Permette di importare hexdecode dalla radice del repo senza installarlo
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


@pytest.fixture
def clean_env(monkeypatch):
    """Rimuove le variabili HEX2BIN_* e ripristina i livelli di log a fine test.

    Ogni variabile viene prima impostata e poi rimossa, così anche i valori
    caricati da un ``.env`` durante il test vengono annullati.
    """
    for name in ("HEX2BIN_STRICT", "HEX2BIN_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    loggers = [logging.getLogger(n) for n in ("hex2bin", "hexdecode")]
    levels = [lg.level for lg in loggers]
    yield monkeypatch
    for lg, level in zip(loggers, levels):
        lg.setLevel(level)
