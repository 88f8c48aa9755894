from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path so we can import pitaval.* without installing.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def template_path() -> Path:
    from pitaval.config import DEFAULT_TEMPLATE

    return DEFAULT_TEMPLATE


@pytest.fixture
def write_txt(tmp_path: Path):
    """Write a UTF-8 input file under ``tmp_path/in`` and return its path."""

    indir = tmp_path / "in"
    indir.mkdir(exist_ok=True)

    def _write(name: str, text: str) -> Path:
        p = indir / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture(autouse=True)
def _drop_installed_log_handlers():
    """Detach handlers set up by the CLI so they don't outlive captured streams."""

    yield
    import logging

    from pitaval import logging_setup

    root = logging.getLogger()
    for h in logging_setup._installed:
        root.removeHandler(h)
        h.close()
    logging_setup._installed.clear()
