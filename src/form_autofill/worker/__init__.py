"""ページ統合レイヤ（Playwright）"""

from .input_handler import FormAutofillHandler

__all__ = ['FormAutofillHandler']
