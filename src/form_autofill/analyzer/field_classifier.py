"""
フィールド分類器

1要素の ElementDescriptor から SemanticKey を決定する。
autocomplete の強トークンを最優先し、無ければルール表による重み付きスコアリングを行う。
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .element_descriptor import ElementDescriptor, SemanticKey
from .field_rules import (
    DEFAULT_FIELD_RULES,
    INPUT_TYPE_BOOST,
    INPUT_TYPE_BOOSTS,
    STRONG_AUTOCOMPLETE_TOKENS,
    FieldRule,
    group_rules_by_key,
)

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 3


def build_text_blob(el: ElementDescriptor) -> str:
    """name/id/placeholder/ラベルを小文字化して空白連結したテキスト"""
    parts = [el.name, el.id, el.placeholder, el.label_text()]
    return " ".join(p.lower() for p in parts if p)


def score_keys(
    blob: str,
    input_type: str,
    grouped_rules: Dict[SemanticKey, List[FieldRule]],
    type_boost: int = INPUT_TYPE_BOOST,
) -> List[Tuple[SemanticKey, int]]:
    """キーごとの合計スコアを評価順に返す（純粋関数）"""
    input_type = (input_type or "").lower()
    boosted = INPUT_TYPE_BOOSTS.get(input_type)
    scores: List[Tuple[SemanticKey, int]] = []
    for key, rules in grouped_rules.items():
        score = sum(r.weight for r in rules if r.matches(blob))
        if boosted is key:
            score += type_boost
        scores.append((key, score))
    return scores


def pick_best(scores: Iterable[Tuple[SemanticKey, int]], min_score: int) -> Optional[SemanticKey]:
    """最高スコアのキー。同点は先に評価されたキーを維持し、閾値未満は None"""
    best_key: Optional[SemanticKey] = None
    best_score = 0
    for key, score in scores:
        if score > best_score:
            best_key, best_score = key, score
    return best_key if best_score >= min_score else None


class FieldClassifier:
    """要素 → SemanticKey の判定クラス"""

    def __init__(
        self,
        rules: Optional[Tuple[FieldRule, ...]] = None,
        min_score: int = DEFAULT_MIN_SCORE,
        type_boost: int = INPUT_TYPE_BOOST,
    ):
        self.grouped_rules = group_rules_by_key(rules if rules is not None else DEFAULT_FIELD_RULES)
        self.min_score = min_score
        self.type_boost = type_boost

    def classify(self, el: ElementDescriptor) -> Optional[SemanticKey]:
        strong = self.classify_by_autocomplete(el)
        if strong is not None:
            return strong

        blob = build_text_blob(el)
        scores = score_keys(blob, el.input_type, self.grouped_rules, self.type_boost)
        key = pick_best(scores, self.min_score)
        if key is not None:
            logger.debug(f"Classified element name='{el.name}' id='{el.id}' as {key.value}")
        return key

    @staticmethod
    def classify_by_autocomplete(el: ElementDescriptor) -> Optional[SemanticKey]:
        token = (el.autocomplete or "").strip().lower()
        return STRONG_AUTOCOMPLETE_TOKENS.get(token)


_default_classifier = FieldClassifier()


def classify(el: ElementDescriptor) -> Optional[SemanticKey]:
    """既定ルールでの分類を行う便利関数"""
    return _default_classifier.classify(el)
