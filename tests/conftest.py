import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory without build related variables set"""
    monkeypatch.delenv("TSC_BUILD_TYPE", raising=False)
    monkeypatch.delenv("MRUBY_BUILD_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
