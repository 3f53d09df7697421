"""
ログサニタイゼーション

入力値（氏名・電話番号・メールアドレス等の個人情報）をログに出す前にマスクする。
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from .env import should_sanitize_logs

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def mask_value(value: Any) -> str:
    """先頭1文字のみ残してマスクする（メールはドメインも隠す）"""
    if isinstance(value, bool):
        return str(value)
    text = "" if value is None else str(value)
    if not text:
        return text
    if _EMAIL_RE.fullmatch(text):
        return "***EMAIL_REDACTED***"
    if len(text) <= 1:
        return "*"
    return text[0] + "*" * (len(text) - 1)


def loggable_value(value: Any) -> str:
    """サニタイズ設定に応じてログ出力用の表現を返す"""
    if should_sanitize_logs():
        return mask_value(value)
    return repr(value)


class ValueRedactionFilter(logging.Filter):
    """ログメッセージ中のメールアドレスを伏せ字にするフィルタ"""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not should_sanitize_logs():
            return True
        if isinstance(record.msg, str):
            record.msg = _redact(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(_redact(a) if isinstance(a, str) else a for a in record.args)
        return True


def _redact(text: str) -> str:
    return _EMAIL_RE.sub("***EMAIL_REDACTED***", text)


def setup_sanitized_logging(logger_name: Optional[str] = None) -> logging.Logger:
    """指定ロガー（None はルート）の各ハンドラに ValueRedactionFilter を一度だけ付与する"""
    target_logger = logging.getLogger(logger_name)
    for handler in target_logger.handlers:
        if not any(isinstance(f, ValueRedactionFilter) for f in handler.filters):
            handler.addFilter(ValueRedactionFilter())
    return target_logger
