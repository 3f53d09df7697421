"""候補値が要素の pattern / maxlength 制約を満たすかの判定"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional, Pattern

from .element_descriptor import ElementDescriptor

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def compile_field_pattern(pattern: str) -> Optional[Pattern[str]]:
    """HTML の pattern 属性と同様に全体一致で評価する正規表現。

    \\d や \\w はブラウザ同様 ASCII のみに一致させる（全角数字を通さない）。
    解釈できないパターンは None（= 制約なし扱い）。
    """
    try:
        # "^" + pattern + "$" の単純連結とは異なり、a|bc のような選択は全体を一致対象にする
        return re.compile(f"(?:{pattern})", re.ASCII)
    except re.error as e:
        logger.debug(f"Ignoring invalid pattern '{pattern}': {e}")
        return None


def satisfies(el: ElementDescriptor, candidate: str) -> bool:
    pattern = (el.pattern or "").strip()
    if pattern:
        compiled = compile_field_pattern(pattern)
        if compiled is not None and compiled.fullmatch(candidate) is None:
            return False
    if el.max_length is not None and el.max_length > 0 and len(candidate) > el.max_length:
        return False
    return True
