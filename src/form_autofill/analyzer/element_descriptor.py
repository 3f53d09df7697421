"""フォーム要素の読み取り専用ビュー（ElementDescriptor）とセマンティックキー定義。

ページ側のオブジェクトモデル（Playwright の ElementHandle 等）には依存せず、
属性の辞書から構築できる狭いインターフェースとして扱う。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class SemanticKey(str, Enum):
    """要素に割り当てる意味上のフィールド種別（1要素につき最大1つ）"""

    NAME_FULL = "name_full"
    NAME_FAMILY = "name_family"
    NAME_GIVEN = "name_given"
    NAME_FULL_KANA = "name_full_kana"
    NAME_FAMILY_KANA = "name_family_kana"
    NAME_GIVEN_KANA = "name_given_kana"
    NAME_FULL_ROMAJI = "name_full_romaji"
    NAME_FAMILY_ROMAJI = "name_family_romaji"
    NAME_GIVEN_ROMAJI = "name_given_romaji"
    EMAIL = "email"
    PHONE = "phone"
    COMPANY = "company"
    ZIP_CODE = "zipCode"
    ADDRESS_LINE1 = "addressLine1"
    ADDRESS_LINE2 = "addressLine2"
    CITY = "city"
    STATE = "state"
    COUNTRY = "country"

    @property
    def is_name(self) -> bool:
        return self.value.startswith("name_")

    @property
    def is_kana(self) -> bool:
        return "kana" in self.value


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _parse_max_length(value: Any) -> Optional[int]:
    # DOM の maxLength は未指定時 -1 を返す
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None


@dataclass(frozen=True)
class ElementDescriptor:
    """1つのフォームコントロールの属性スナップショット"""

    tag: str = "input"
    input_type: str = ""
    name: str = ""
    id: str = ""
    placeholder: str = ""
    pattern: str = ""
    max_length: Optional[int] = None
    autocomplete: str = ""
    associated_label_text: str = ""
    aria_label: str = ""

    @classmethod
    def from_attributes(cls, attrs: Optional[Mapping[str, Any]]) -> "ElementDescriptor":
        """属性辞書から構築する。

        キーは DOM 由来の camelCase（``maxLength``, ``ariaLabel`` 等）と
        snake_case の両方を受け付ける。欠損値は空文字として扱う。
        """
        attrs = attrs or {}

        def pick(*keys: str) -> Any:
            for k in keys:
                if k in attrs and attrs[k] is not None:
                    return attrs[k]
            return None

        return cls(
            tag=_text(pick("tag", "tag_name", "tagName")).lower() or "input",
            input_type=_text(pick("input_type", "type", "inputType")).lower(),
            name=_text(pick("name")),
            id=_text(pick("id")),
            placeholder=_text(pick("placeholder")),
            pattern=_text(pick("pattern")),
            max_length=_parse_max_length(pick("max_length", "maxLength", "maxlength")),
            autocomplete=_text(pick("autocomplete", "autocomplete_token", "autocompleteToken")),
            associated_label_text=_text(
                pick("associated_label_text", "associatedLabelText", "label_text", "labelText")
            ),
            aria_label=_text(pick("aria_label", "ariaLabel", "aria-label")),
        )

    @property
    def is_toggle(self) -> bool:
        """checkbox/radio のように真偽値で入力するコントロールか"""
        return self.tag == "input" and self.input_type in ("checkbox", "radio")

    def label_text(self) -> str:
        """関連ラベル → aria-label → 空文字 の順で解決したラベル文字列"""
        return self.associated_label_text or self.aria_label or ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "input_type": self.input_type,
            "name": self.name,
            "id": self.id,
            "placeholder": self.placeholder,
            "pattern": self.pattern,
            "max_length": self.max_length,
            "autocomplete": self.autocomplete,
            "associated_label_text": self.associated_label_text,
            "aria_label": self.aria_label,
        }
