"""
フィールド判定ルール定義

(キー, 正規表現, 重み) の組をデータとして保持し、スコアリング処理から分離する。
ルールは小文字化済みのテキストブロブ（name/id/placeholder/ラベル）に対して評価される。

重みの相対関係:
- カナ/ふりがな系の明示ヒント(6)、メール/電話/郵便番号(6) は住所・地域系より強い
- 氏名系の一般ヒントは 5
- 市区町村/都道府県/国 は 3（単独で閾値ぎりぎり）
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Pattern, Tuple

from .element_descriptor import SemanticKey


@dataclass(frozen=True)
class FieldRule:
    """1件の判定ルール"""

    key: SemanticKey
    pattern: Pattern[str]
    weight: int

    def matches(self, blob: str) -> bool:
        return self.pattern.search(blob) is not None


def _rule(key: SemanticKey, pattern: str, weight: int) -> FieldRule:
    return FieldRule(key=key, pattern=re.compile(pattern), weight=weight)


# 並び順がそのまま同点時の優先順位になる
# 単語境界は ASCII 基準（直後のかな・漢字は境界扱い）で先読みとして書く
DEFAULT_FIELD_RULES: Tuple[FieldRule, ...] = (
    _rule(SemanticKey.NAME_FULL, r"氏名|お?名前|name(?![A-Za-z0-9_])|full\s*name", 5),
    _rule(SemanticKey.NAME_FAMILY, r"姓|苗字|みょうじ|family|last\s*name|surname", 5),
    _rule(SemanticKey.NAME_GIVEN, r"名|下の名前|given|first\s*name", 5),
    _rule(SemanticKey.NAME_FULL_KANA, r"フリガナ|ふりがな|カナ|kana", 6),
    _rule(SemanticKey.NAME_FAMILY_KANA, r"姓.*(カナ|かな)|せい.*(カナ|かな)", 6),
    _rule(SemanticKey.NAME_FAMILY_KANA, r"sei.*kana", 5),
    _rule(SemanticKey.NAME_GIVEN_KANA, r"名.*(カナ|かな)|めい.*(カナ|かな)", 6),
    _rule(SemanticKey.NAME_GIVEN_KANA, r"mei.*kana", 5),
    _rule(SemanticKey.NAME_FULL_ROMAJI, r"romaji|alphabet|english\s*name|latin", 5),
    _rule(SemanticKey.NAME_FAMILY_ROMAJI, r"family.*(romaji|alphabet)|last.*(romaji|alphabet)", 4),
    _rule(SemanticKey.NAME_GIVEN_ROMAJI, r"given.*(romaji|alphabet)|first.*(romaji|alphabet)", 4),
    _rule(SemanticKey.EMAIL, r"mail|e-?mail|メール", 6),
    _rule(SemanticKey.PHONE, r"tel|phone|電話|携帯|スマホ", 6),
    _rule(SemanticKey.COMPANY, r"会社|勤務先|corporate|company|organization|所属", 4),
    _rule(SemanticKey.ZIP_CODE, r"郵便|post\s*code|postal|zip", 6),
    _rule(SemanticKey.ADDRESS_LINE1, r"住所|address(?!.*2)|street|番地|丁目", 5),
    _rule(SemanticKey.ADDRESS_LINE2, r"住所.*2|address\s*2|apt|suite|建物|号室", 5),
    _rule(SemanticKey.CITY, r"市|区|town|city|locality", 3),
    _rule(SemanticKey.STATE, r"都|道|府|県|prefecture|state|province", 3),
    _rule(SemanticKey.COUNTRY, r"国|country", 3),
)

# autocomplete 属性の強トークン（スコアリングを経由せず即確定）
STRONG_AUTOCOMPLETE_TOKENS: Mapping[str, SemanticKey] = {
    "name": SemanticKey.NAME_FULL,
    "family-name": SemanticKey.NAME_FAMILY,
    "given-name": SemanticKey.NAME_GIVEN,
    "tel": SemanticKey.PHONE,
    "tel-national": SemanticKey.PHONE,
    "email": SemanticKey.EMAIL,
    "postal-code": SemanticKey.ZIP_CODE,
    "address-line1": SemanticKey.ADDRESS_LINE1,
    "address-line2": SemanticKey.ADDRESS_LINE2,
    "address-level2": SemanticKey.CITY,
    "address-level1": SemanticKey.STATE,
    "country": SemanticKey.COUNTRY,
    "country-name": SemanticKey.COUNTRY,
}

# input[type] による加点
INPUT_TYPE_BOOSTS: Mapping[str, SemanticKey] = {
    "email": SemanticKey.EMAIL,
    "tel": SemanticKey.PHONE,
}
INPUT_TYPE_BOOST = 3


def group_rules_by_key(rules: Optional[Tuple[FieldRule, ...]] = None) -> Dict[SemanticKey, List[FieldRule]]:
    """キーごとにルールをまとめる。

    SemanticKey の定義順を保ち、ルールを持たないキーも空リストで含める。
    """
    grouped: Dict[SemanticKey, List[FieldRule]] = {k: [] for k in SemanticKey}
    for r in rules if rules is not None else DEFAULT_FIELD_RULES:
        grouped.setdefault(r.key, []).append(r)
    return grouped
