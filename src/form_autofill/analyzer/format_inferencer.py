"""要素メタデータ（pattern / placeholder / maxlength）から期待される入力書式を推定する"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .element_descriptor import ElementDescriptor, SemanticKey

_FULL_WIDTH_DIGIT_RE = re.compile(r"[０-９]")
_KATAKANA_HINT_RE = re.compile(r"カナ|ｶﾅ|カタカナ")
_HIRAGANA_HINT_RE = re.compile(r"ひらがな")
_HYPHEN_HINT_RES = (
    re.compile(r"[-－]"),
    re.compile(r"\d{3}-\d{4}"),
    re.compile(r"\d+[-－]\d+"),
)

# maxlength による上書き: {キー: {maxlength: want_hyphen}}
_MAX_LENGTH_HYPHEN_OVERRIDES = {
    SemanticKey.ZIP_CODE: {7: False, 8: True},
    SemanticKey.PHONE: {10: False, 11: False, 12: True, 13: True},
}


@dataclass(frozen=True)
class FormatRequirement:
    wants_full_width: bool = False
    want_hyphen: bool = False
    wants_katakana: bool = False
    wants_hiragana: bool = False

    @property
    def has_conflicting_kana_hints(self) -> bool:
        """カタカナ・ひらがな両方のヒントが同時に検出された（ページ側の矛盾）"""
        return self.wants_katakana and self.wants_hiragana


def inspection_text(el: ElementDescriptor) -> str:
    return " ".join([(el.pattern or "").strip(), (el.placeholder or "").strip()])


def infer(el: ElementDescriptor, key: SemanticKey) -> FormatRequirement:
    """要素とキーから FormatRequirement を導出する（純粋関数）"""
    text = inspection_text(el)

    want_hyphen = any(r.search(text) for r in _HYPHEN_HINT_RES)
    overrides = _MAX_LENGTH_HYPHEN_OVERRIDES.get(key)
    if overrides and el.max_length in overrides:
        want_hyphen = overrides[el.max_length]

    return FormatRequirement(
        wants_full_width=_FULL_WIDTH_DIGIT_RE.search(text) is not None,
        want_hyphen=want_hyphen,
        wants_katakana=_KATAKANA_HINT_RE.search(text) is not None,
        wants_hiragana=_HIRAGANA_HINT_RE.search(text) is not None,
    )
