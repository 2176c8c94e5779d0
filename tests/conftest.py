from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Dynamically ensure src/ and tests/ are importable without an install
ROOT = Path(__file__).resolve().parents[1]
for _p in (ROOT / "src", ROOT / "tests"):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

from adante.logging.helpers import reset_base_logger  # noqa: E402
from adante.plugins import registry  # noqa: E402
from keytypes import ActionType, ErrorType, FlagType  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for var in ("ADANTE_TRACE_PARSE", "ADANTE_JSON_LOGS", "ADANTE_CLASSIFIER_PLUGINS"):
        monkeypatch.delenv(var, raising=False)
    registry.reset_registry()
    yield
    reset_base_logger()
    registry.reset_registry()


@pytest.fixture
def simulate():
    """Parse *tokens* with the test key types; ErrorType.SYNTAX on failure."""
    from adante import try_parse

    def _run(tokens):
        return try_parse(tokens, ErrorType.SYNTAX, flags=FlagType, actions=ActionType)

    return _run
