"""書式違いの候補値を生成し、要素制約を満たす最初の候補を選ぶ。

候補順:
1. 基本値（整形済みの値そのもの。再整形は必要な場合のみ）
2. 電話/郵便番号: ハイフン有無を反転した値
3. 全角数字版（基本値と異なる場合）
4. 半角版（基本値と異なる場合）
いずれも制約を満たさなければ基本値をそのまま返す（入力を止めない）。
"""

from __future__ import annotations

from typing import List

from .constraint_validator import satisfies
from .element_descriptor import ElementDescriptor, SemanticKey
from .format_inferencer import FormatRequirement
from .value_formatter import format_phone, format_postal, to_full_width_digits, to_half_width


def build_candidates(key: SemanticKey, base: str, req: FormatRequirement) -> List[str]:
    candidates = [base]
    if key is SemanticKey.PHONE:
        candidates.append(format_phone(base, not req.want_hyphen))
    elif key is SemanticKey.ZIP_CODE:
        candidates.append(format_postal(base, not req.want_hyphen))

    full_width = to_full_width_digits(base)
    half_width = to_half_width(base)
    if full_width != base:
        candidates.append(full_width)
    if half_width != base:
        candidates.append(half_width)
    return candidates


def choose(el: ElementDescriptor, key: SemanticKey, base: str, req: FormatRequirement) -> str:
    for candidate in build_candidates(key, base, req):
        if satisfies(el, candidate):
            return candidate
    return base
