"""
ページ上のフォーム要素への自動入力を担当するハンドラ

要素の列挙・属性スナップショットの取得・値の書き込み（input/change イベント発火）を行い、
値の決定そのものは AutofillEngine に委譲する。
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from playwright.async_api import ElementHandle, Page

from form_autofill.analyzer import AutofillEngine, ElementDescriptor, FieldClassifier
from form_autofill.utils.log_sanitizer import loggable_value

# ラベル解決: for 属性のラベル → 祖先ラベル。失敗時は空文字
DESCRIBE_ELEMENT_JS = """
el => {
  let label = '';
  try {
    if (el.id) {
      const byFor = el.ownerDocument.querySelector(`label[for="${CSS.escape(el.id)}"]`);
      if (byFor && byFor.textContent) label = byFor.textContent;
    }
    if (!label) {
      const closest = el.closest('label');
      if (closest && closest.textContent) label = closest.textContent;
    }
  } catch (_) { label = ''; }
  return {
    tag: (el.tagName || '').toLowerCase(),
    type: (el.type || '').toLowerCase(),
    name: el.getAttribute('name') || '',
    id: el.id || '',
    placeholder: el.getAttribute('placeholder') || '',
    pattern: el.getAttribute('pattern') || '',
    maxLength: typeof el.maxLength === 'number' ? el.maxLength : null,
    autocomplete: el.getAttribute('autocomplete') || '',
    associatedLabelText: label,
    ariaLabel: el.getAttribute('aria-label') || '',
  };
}
"""

SET_VALUE_JS = """
(el, value) => {
  const fire = () => {
    el.dispatchEvent(new Event('input', { bubbles: true }));
    el.dispatchEvent(new Event('change', { bubbles: true }));
  };
  if (el.tagName === 'SELECT') {
    el.value = value;
  } else if (el.type === 'checkbox' || el.type === 'radio') {
    el.checked = Boolean(value);
  } else {
    el.value = value;
  }
  fire();
}
"""


class FormAutofillHandler:
    """1ページ分のフォーム要素をプロフィール値で埋める"""

    def __init__(self, page: Page, engine: Optional[AutofillEngine] = None,
                 fill_config: Optional[Dict[str, Any]] = None, worker_id: int = 0,
                 classifier: Optional[FieldClassifier] = None):
        self.page = page
        self.worker_id = worker_id
        self.logger = logging.getLogger(f"{__name__}.w{worker_id}")
        cfg = fill_config or {}
        self.element_selector = cfg.get("element_selector", "input, textarea, select")
        self.skip_input_types = set(cfg.get("skip_input_types", []))
        trace_logger = self.logger if cfg.get("trace", True) else None
        self.engine = engine or AutofillEngine(classifier=classifier, logger=trace_logger)

    async def collect_elements(self) -> List[Tuple[ElementHandle, ElementDescriptor]]:
        """ページ上の入力要素と属性スナップショットを文書順に取得する"""
        handles = await self.page.query_selector_all(self.element_selector)
        collected: List[Tuple[ElementHandle, ElementDescriptor]] = []
        for handle in handles:
            try:
                attrs = await handle.evaluate(DESCRIBE_ELEMENT_JS)
            except Exception as e:
                self.logger.debug(f"Could not describe element, skipping: {e}")
                continue
            descriptor = ElementDescriptor.from_attributes(attrs)
            if descriptor.input_type in self.skip_input_types:
                continue
            collected.append((handle, descriptor))
        return collected

    async def apply_value(self, element: ElementHandle, value: Any) -> bool:
        """値を書き込み input/change イベントを発火する"""
        try:
            await element.evaluate(SET_VALUE_JS, value)
            return True
        except Exception as e:
            self.logger.warning(f"Failed to apply value: {e}")
            return False

    async def fill_page(self, profile: Optional[Mapping[str, Any]]) -> List[str]:
        """プロフィール（id/name/data 形式、または data そのもの）でページを埋める。

        Returns:
            入力に成功した SemanticKey 値のリスト（文書順）
        """
        data = _profile_data(profile)
        if not data:
            self.logger.info("No profile data available; nothing to fill")
            return []

        filled: List[str] = []
        for element, descriptor in await self.collect_elements():
            try:
                decision = self.engine.decide(descriptor, data)
            except Exception as e:
                self.logger.error(f"Error deciding value for name='{descriptor.name}' id='{descriptor.id}': {e}")
                continue
            if decision is None:
                continue
            if await self.apply_value(element, decision.value):
                filled.append(decision.key.value)
                self.logger.info(f"Filled {decision.key.value} => {loggable_value(decision.value)}")
        self.logger.info(f"Autofill completed: {len(filled)} fields filled")
        return filled


def _profile_data(profile: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if not profile:
        return None
    data = profile.get("data") if "data" in profile else profile
    return data if isinstance(data, Mapping) else None
