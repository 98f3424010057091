from __future__ import annotations

import os
import sys

import pytest


SCRIPT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "scripts"))
if SCRIPT_DIR not in sys.path:
    sys.path.insert(0, SCRIPT_DIR)

from iyzico_sign_sample import main  # noqa: E402
from settings import settings  # noqa: E402
from tests.conftest import API_KEY, SECRET_KEY  # noqa: E402


@pytest.fixture
def sandbox_credentials(monkeypatch):
    monkeypatch.setattr(settings, "IYZICO_MODE", "sandbox", raising=False)
    monkeypatch.setattr(settings, "IYZICO_SANDBOX_API_KEY", API_KEY, raising=False)
    monkeypatch.setattr(settings, "IYZICO_SANDBOX_SECRET_KEY", SECRET_KEY, raising=False)


@pytest.mark.parametrize("kind", ["payment", "bkm"])
def test_sample_output_hides_card_and_secrets(kind, sandbox_credentials, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["iyzico_sign_sample.py", "--kind", kind, "--nonce", "123456789"])

    assert main() == 0
    out = capsys.readouterr().out

    assert "canonical request string:" in out
    assert '"x-iyzi-rnd": "123456789"' in out
    assert "5528790000000008" not in out
    assert "cvc=123" not in out
    assert "John Doe" not in out
    assert SECRET_KEY not in out
    assert "IYZWS" not in out


def test_sample_without_credentials(monkeypatch, capsys):
    for name in ("IYZICO_SANDBOX_API_KEY", "IYZICO_SANDBOX_SECRET_KEY", "IYZICO_API_KEY", "IYZICO_SECRET_KEY"):
        monkeypatch.setattr(settings, name, "", raising=False)
    monkeypatch.setattr(settings, "IYZICO_MODE", "sandbox", raising=False)
    monkeypatch.setattr(sys, "argv", ["iyzico_sign_sample.py"])

    assert main() == 2
    assert "Missing iyzico credentials for mode=sandbox" in capsys.readouterr().out
