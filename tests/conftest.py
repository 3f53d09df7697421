import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from form_autofill.utils import env  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_runtime_env(monkeypatch):
    """CI 判定・サニタイズ設定をテストごとにローカル扱いへ揃える"""
    for name in ("FORM_AUTOFILL_ENV", "FORM_AUTOFILL_LOG_SANITIZE", "FORM_AUTOFILL_PROFILE_PATH",
                 "GITHUB_ACTIONS", "CI"):
        monkeypatch.delenv(name, raising=False)
    env.reset_cache()
    yield
    env.reset_cache()
