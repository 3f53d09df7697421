"""
プロフィールから入力値を取り出すロジック

氏名系キーは漢字 → 明示フルネーム → ローマ字 → カナ の優先順で解決し、
フルネームが無い場合は姓・名から合成する（漢字/カナは区切りなし、ローマ字は半角スペース区切り）。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, TypedDict

from .element_descriptor import SemanticKey
from .format_inferencer import FormatRequirement
from .value_formatter import to_hiragana, to_katakana

logger = logging.getLogger(__name__)


class ProfileData(TypedDict, total=False):
    """プロフィール data セクションの型定義"""

    familyNameKanji: str
    givenNameKanji: str
    fullNameKanji: str
    familyNameRomaji: str
    givenNameRomaji: str
    fullNameRomaji: str
    familyNameKana: str
    givenNameKana: str
    fullNameKana: str
    fullName: str
    email: str
    phone: str
    company: str
    zipCode: str
    addressLine1: str
    addressLine2: str
    city: str
    state: str
    country: str


def _first(*values: Any) -> Optional[Any]:
    for v in values:
        if v:
            return v
    return None


def _compose(family: Any, given: Any, sep: str = "") -> Optional[str]:
    if family and given:
        return f"{family}{sep}{given}"
    return None


def name_variants(profile: Mapping[str, Any]) -> Dict[str, Optional[Any]]:
    """漢字/ローマ字/カナそれぞれの姓・名・フルネームを求める"""
    fam_k, giv_k = profile.get("familyNameKanji"), profile.get("givenNameKanji")
    fam_r, giv_r = profile.get("familyNameRomaji"), profile.get("givenNameRomaji")
    fam_f, giv_f = profile.get("familyNameKana"), profile.get("givenNameKana")
    return {
        "family_kanji": fam_k,
        "given_kanji": giv_k,
        "full_kanji": _first(profile.get("fullNameKanji"), _compose(fam_k, giv_k)),
        "family_romaji": fam_r,
        "given_romaji": giv_r,
        "full_romaji": _first(profile.get("fullNameRomaji"), _compose(fam_r, giv_r, " ")),
        "family_kana": fam_f,
        "given_kana": giv_f,
        "full_kana": _first(profile.get("fullNameKana"), _compose(fam_f, giv_f)),
    }


def resolve_name(
    profile: Optional[Mapping[str, Any]],
    key: SemanticKey,
    req: Optional[FormatRequirement] = None,
) -> Optional[str]:
    p = profile or {}
    v = name_variants(p)

    if key is SemanticKey.NAME_FULL:
        val = _first(v["full_kanji"], p.get("fullName"), p.get("fullname"), v["full_romaji"], v["full_kana"])
    elif key is SemanticKey.NAME_FAMILY:
        val = _first(v["family_kanji"], p.get("lastName"), p.get("familyName"))
    elif key is SemanticKey.NAME_GIVEN:
        val = _first(v["given_kanji"], p.get("firstName"), p.get("givenName"))
    elif key is SemanticKey.NAME_FULL_KANA:
        val = v["full_kana"]
    elif key is SemanticKey.NAME_FAMILY_KANA:
        val = v["family_kana"]
    elif key is SemanticKey.NAME_GIVEN_KANA:
        val = v["given_kana"]
    elif key is SemanticKey.NAME_FULL_ROMAJI:
        val = v["full_romaji"]
    elif key is SemanticKey.NAME_FAMILY_ROMAJI:
        val = v["family_romaji"]
    elif key is SemanticKey.NAME_GIVEN_ROMAJI:
        val = v["given_romaji"]
    else:
        val = _first(p.get("fullName"), p.get("fullname"))

    if val is None:
        return None
    val = str(val)

    if key.is_kana and val and req is not None:
        # 両方のヒントがある場合も順に適用する（カタカナ化 → ひらがな化）
        if req.has_conflicting_kana_hints:
            logger.warning(f"Both katakana and hiragana hints detected for {key.value}; applying both in order")
        if req.wants_katakana:
            val = to_katakana(val)
        if req.wants_hiragana:
            val = to_hiragana(val)
    return val


def resolve_field(profile: Optional[Mapping[str, Any]], key: SemanticKey) -> Optional[Any]:
    """氏名以外のキーはプロフィールのキー名で直接参照する（欠損は None）"""
    if not profile:
        return None
    return profile.get(key.value)
