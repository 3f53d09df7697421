"""環境変数ユーティリティ

ローカル実行 / CI 実行間で共通の環境判定処理を提供する。
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

RuntimeEnv = Literal["github_actions", "ci", "local"]

FORM_AUTOFILL_ENV_VAR = "FORM_AUTOFILL_ENV"
FORM_AUTOFILL_LOG_SANITIZE_VAR = "FORM_AUTOFILL_LOG_SANITIZE"
FORM_AUTOFILL_PROFILE_PATH_VAR = "FORM_AUTOFILL_PROFILE_PATH"


@lru_cache(maxsize=None)
def get_runtime_environment() -> RuntimeEnv:
    """現在の実行環境を判定する。

    優先順位:
    1. FORM_AUTOFILL_ENV（github_actions / ci / local）
    2. GITHUB_ACTIONS が true の場合は github_actions
    3. CI が true の場合は ci
    4. 上記以外は local
    """
    explicit_env = os.getenv(FORM_AUTOFILL_ENV_VAR)
    if explicit_env:
        normalized = explicit_env.strip().lower()
        if normalized in {"github_actions", "ci", "local"}:
            return normalized  # type: ignore[return-value]
        return "local"

    if os.getenv("GITHUB_ACTIONS", "").lower() == "true":
        return "github_actions"

    if os.getenv("CI", "").lower() == "true":
        return "ci"

    return "local"


@lru_cache(maxsize=None)
def should_sanitize_logs() -> bool:
    """ログ中の個人情報をマスクすべきか判定する。"""
    override = os.getenv(FORM_AUTOFILL_LOG_SANITIZE_VAR)
    if override is not None:
        return override.strip().lower() in {"1", "true", "yes"}

    # CI 上では常にマスクする
    return is_ci_environment()


def is_ci_environment() -> bool:
    return get_runtime_environment() in {"github_actions", "ci"}


def get_profile_path_override() -> Optional[Path]:
    """FORM_AUTOFILL_PROFILE_PATH が指定されていればそのパス"""
    raw = os.getenv(FORM_AUTOFILL_PROFILE_PATH_VAR, "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def reset_cache() -> None:
    """テスト用にキャッシュをリセットする。"""
    get_runtime_environment.cache_clear()
    should_sanitize_logs.cache_clear()
