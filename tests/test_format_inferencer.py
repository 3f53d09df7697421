from form_autofill.analyzer import ElementDescriptor, FormatRequirement, SemanticKey, infer


def test_hyphen_hint_from_placeholder():
    req = infer(ElementDescriptor(placeholder="090-1234-5678"), SemanticKey.PHONE)
    assert req.want_hyphen is True
    assert req.wants_full_width is False


def test_no_hint_defaults_false():
    assert infer(ElementDescriptor(placeholder="09012345678"), SemanticKey.PHONE) == FormatRequirement()


def test_phone_max_length_overrides_hint():
    el = ElementDescriptor(placeholder="090-1234-5678", max_length=11)
    assert infer(el, SemanticKey.PHONE).want_hyphen is False
    el = ElementDescriptor(placeholder="09012345678", max_length=13)
    assert infer(el, SemanticKey.PHONE).want_hyphen is True


def test_zip_max_length_overrides_hint():
    assert infer(ElementDescriptor(placeholder="123-4567", max_length=7), SemanticKey.ZIP_CODE).want_hyphen is False
    assert infer(ElementDescriptor(placeholder="1234567", max_length=8), SemanticKey.ZIP_CODE).want_hyphen is True


def test_max_length_override_only_for_phone_and_zip():
    el = ElementDescriptor(placeholder="1234567", max_length=8)
    assert infer(el, SemanticKey.EMAIL).want_hyphen is False


def test_full_width_digit_hint_from_pattern():
    req = infer(ElementDescriptor(pattern="[０-９]+"), SemanticKey.PHONE)
    assert req.wants_full_width is True


def test_kana_hints_are_independent():
    kata = infer(ElementDescriptor(placeholder="カタカナで入力"), SemanticKey.NAME_FULL_KANA)
    assert kata.wants_katakana and not kata.wants_hiragana
    hira = infer(ElementDescriptor(placeholder="ひらがな"), SemanticKey.NAME_FULL_KANA)
    assert hira.wants_hiragana and not hira.wants_katakana
    both = infer(ElementDescriptor(placeholder="ｶﾅ / ひらがな"), SemanticKey.NAME_FULL_KANA)
    assert both.has_conflicting_kana_hints


def test_label_text_is_not_inspected():
    req = infer(ElementDescriptor(associated_label_text="電話番号（ハイフンあり 090-0000-0000）"), SemanticKey.PHONE)
    assert req.want_hyphen is False
