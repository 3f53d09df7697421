"""
Form Autofill

ローカルに保存したプロフィールから、日本向けの書式（氏名カナ/ローマ字、
郵便番号・電話番号のハイフン、全角/半角）に合わせてフォーム要素を自動入力する。
"""

__version__ = "0.1.0"
