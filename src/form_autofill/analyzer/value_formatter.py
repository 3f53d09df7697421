"""文字種・幅・区切りの変換ユーティリティ（状態を持たない純粋関数群）。

- 全角/半角変換
- ひらがな/カタカナ変換
- 電話番号・郵便番号のハイフン整形（日本向け）
"""

from __future__ import annotations

import re
from typing import Optional

# 全角英数記号（！〜～）は半角から 0xFEE0 ずれた位置にある
_FULL_WIDTH_SHIFT = 0xFEE0
_FULL_WIDTH_SYMBOLS_RE = re.compile(r"[！-～]")
_IDEOGRAPHIC_SPACE = "　"

_FULL_WIDTH_DIGIT_TABLE = str.maketrans({
    "0": "０", "1": "１", "2": "２", "3": "３", "4": "４",
    "5": "５", "6": "６", "7": "７", "8": "８", "9": "９",
    "-": "－",
})

# ひらがな(ぁ-ゖ) と カタカナ(ァ-ヶ) は 0x60 差
_KANA_SHIFT = 0x60
_HIRAGANA_RE = re.compile(r"[ぁ-ゖ]")
_KATAKANA_RE = re.compile(r"[ァ-ヶ]")

_NON_DIGIT_RE = re.compile(r"[^0-9]")

_PHONE_11_RE = re.compile(r"([0-9]{3})([0-9]{4})([0-9]{4})")
_PHONE_10_RE = re.compile(r"([0-9]{2,3})([0-9]{3,4})([0-9]{4})")
_PHONE_9_RE = re.compile(r"([0-9]{2})([0-9]{3})([0-9]{4})")
_POSTAL_RE = re.compile(r"([0-9]{3})([0-9]{4})")


def to_half_width(s: Optional[str]) -> Optional[str]:
    """全角英数記号を半角へ、全角スペースを半角スペースへ"""
    if s is None:
        return s
    out = _FULL_WIDTH_SYMBOLS_RE.sub(lambda m: chr(ord(m.group(0)) - _FULL_WIDTH_SHIFT), str(s))
    return out.replace(_IDEOGRAPHIC_SPACE, " ")


def to_full_width_digits(s: Optional[str]) -> Optional[str]:
    """半角数字とハイフンのみ全角へ（他の文字は不変）"""
    if s is None:
        return s
    return str(s).translate(_FULL_WIDTH_DIGIT_TABLE)


def to_katakana(s: Optional[str]) -> Optional[str]:
    if not s:
        return s
    return _HIRAGANA_RE.sub(lambda m: chr(ord(m.group(0)) + _KANA_SHIFT), str(s))


def to_hiragana(s: Optional[str]) -> Optional[str]:
    if not s:
        return s
    return _KATAKANA_RE.sub(lambda m: chr(ord(m.group(0)) - _KANA_SHIFT), str(s))


def digits_only(s: Optional[str]) -> str:
    """ASCII 数字以外を除去（全角数字も除去されるため事前に半角化すること）"""
    return _NON_DIGIT_RE.sub("", str(s or ""))


def format_phone(raw: Optional[str], want_hyphen: bool) -> str:
    """日本の電話番号を整形する。

    11桁: 3-4-4 / 10桁: 2~3-3~4-4 / 9桁: 2-3-4。
    それ以外の桁数はハイフン指定があっても数字のみを返す。
    """
    d = digits_only(to_half_width(raw))
    if not want_hyphen:
        return d
    if len(d) == 11:
        return _PHONE_11_RE.sub(r"\1-\2-\3", d)
    if len(d) == 10:
        return _PHONE_10_RE.sub(r"\1-\2-\3", d)
    if len(d) == 9:
        return _PHONE_9_RE.sub(r"\1-\2-\3", d)
    return d


def format_postal(raw: Optional[str], want_hyphen: bool) -> str:
    """郵便番号を整形する（7桁のみ 3-4 にハイフン区切り）"""
    d = digits_only(to_half_width(raw))
    if not want_hyphen:
        return d
    if len(d) == 7:
        return _POSTAL_RE.sub(r"\1-\2", d)
    return d
