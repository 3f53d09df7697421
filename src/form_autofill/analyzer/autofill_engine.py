"""
要素単位の自動入力パイプライン

classify → infer → resolve → format/choose の順に処理し、
要素へ書き込むべき最終値（文字列、checkbox/radio は真偽値）を返す。
要素の現在値は参照しないため、同一入力に対して常に同じ結果になる。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from form_autofill.utils.log_sanitizer import loggable_value

from .candidate_selector import choose
from .element_descriptor import ElementDescriptor, SemanticKey
from .field_classifier import FieldClassifier
from .format_inferencer import FormatRequirement, infer
from .profile_resolver import resolve_field, resolve_name
from .value_formatter import format_phone, format_postal, to_full_width_digits, to_half_width

FillValue = Union[str, bool]


@dataclass(frozen=True)
class FillDecision:
    key: SemanticKey
    value: FillValue
    requirement: FormatRequirement


class AutofillEngine:
    """1要素ごとの入力値決定を担当するクラス

    Args:
        classifier: 要素分類器（省略時は既定ルール）
        logger: 入力トレースの出力先。None の場合トレースは出さない
    """

    def __init__(self, classifier: Optional[FieldClassifier] = None,
                 logger: Optional[logging.Logger] = None):
        self.classifier = classifier or FieldClassifier()
        self.logger = logger

    def decide(self, el: ElementDescriptor, profile: Optional[Mapping[str, Any]]) -> Optional[FillDecision]:
        """要素に入力すべき値を決定する。該当なし・値なしの場合は None"""
        if not profile:
            return None

        key = self.classifier.classify(el)
        if key is None:
            return None

        req = infer(el, key)
        if key.is_name:
            raw = resolve_name(profile, key, req)
            if raw is None:
                return None
            value = self._format_name(el, key, raw, req)
        else:
            raw = resolve_field(profile, key)
            if raw is None:
                return None
            value = self._format_field(el, key, raw, req)

        final: FillValue = bool(value) if el.is_toggle else value
        self._trace(key, final)
        return FillDecision(key=key, value=final, requirement=req)

    def _format_name(self, el: ElementDescriptor, key: SemanticKey, raw: str,
                     req: FormatRequirement) -> str:
        # 氏名は文字種変換済み。幅変換は行わず制約チェックのみ
        return choose(el, key, raw, req)

    def _format_field(self, el: ElementDescriptor, key: SemanticKey, raw: Any,
                      req: FormatRequirement) -> str:
        if key is SemanticKey.PHONE:
            base = format_phone(str(raw), req.want_hyphen)
        elif key is SemanticKey.ZIP_CODE:
            base = format_postal(str(raw), req.want_hyphen)
        else:
            # 判定ロジック用にまず半角へ寄せる
            base = to_half_width(str(raw)) or ""

        # 全角数字が求められている場合は選択前に全角化（制約に合わなければ半角候補が選ばれる）
        if req.wants_full_width:
            base = to_full_width_digits(base) or ""
        return choose(el, key, base, req)

    def _trace(self, key: SemanticKey, value: FillValue) -> None:
        if self.logger is None:
            return
        self.logger.debug(f"[AutoFill] {key.value} => {loggable_value(value)}")
