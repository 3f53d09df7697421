"""
フィールド分類・書式推定エンジン

フォーム要素の属性から入力すべきフィールド種別を判定し、
日本向けの書式（カナ/全角/ハイフン）に合わせた値を生成する。
ページ操作やプロフィール保存には依存しない。
"""

from .element_descriptor import ElementDescriptor, SemanticKey
from .field_rules import DEFAULT_FIELD_RULES, FieldRule
from .field_classifier import FieldClassifier, classify
from .format_inferencer import FormatRequirement, infer
from .constraint_validator import satisfies
from .candidate_selector import choose
from .profile_resolver import resolve_field, resolve_name
from .autofill_engine import AutofillEngine, FillDecision

__all__ = [
    'ElementDescriptor',
    'SemanticKey',
    'DEFAULT_FIELD_RULES',
    'FieldRule',
    'FieldClassifier',
    'classify',
    'FormatRequirement',
    'infer',
    'satisfies',
    'choose',
    'resolve_field',
    'resolve_name',
    'AutofillEngine',
    'FillDecision',
]
