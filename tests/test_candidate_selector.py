from form_autofill.analyzer import ElementDescriptor, FormatRequirement, SemanticKey, choose
from form_autofill.analyzer.candidate_selector import build_candidates


def test_base_value_kept_when_it_satisfies():
    el = ElementDescriptor(pattern=r"\d{3}-\d{4}-\d{4}")
    req = FormatRequirement(want_hyphen=True)
    assert choose(el, SemanticKey.PHONE, "090-1234-5678", req) == "090-1234-5678"


def test_phone_opposite_hyphenation_is_tried():
    el = ElementDescriptor(pattern="[0-9]{11}")
    req = FormatRequirement(want_hyphen=True)
    assert choose(el, SemanticKey.PHONE, "090-1234-5678", req) == "09012345678"


def test_postal_opposite_hyphenation_is_tried():
    el = ElementDescriptor(pattern=r"\d{3}-\d{4}")
    req = FormatRequirement(want_hyphen=False)
    assert choose(el, SemanticKey.ZIP_CODE, "1234567", req) == "123-4567"


def test_half_width_candidate():
    el = ElementDescriptor(pattern="[0-9]+")
    assert choose(el, SemanticKey.COMPANY, "１２３", FormatRequirement()) == "123"


def test_full_width_candidate():
    el = ElementDescriptor(pattern="[０-９]+")
    assert choose(el, SemanticKey.ADDRESS_LINE1, "123", FormatRequirement()) == "１２３"


def test_returns_base_when_nothing_satisfies():
    el = ElementDescriptor(pattern="^[A-Z]+$")
    req = FormatRequirement(want_hyphen=True)
    assert choose(el, SemanticKey.PHONE, "090-1234-5678", req) == "090-1234-5678"
    assert choose(el, SemanticKey.ZIP_CODE, "123-4567", req) == "123-4567"


def test_build_candidates_order_and_dedup():
    req = FormatRequirement(want_hyphen=False)
    assert build_candidates(SemanticKey.PHONE, "09012345678", req) == [
        "09012345678",
        "090-1234-5678",
        "０９０１２３４５６７８",
    ]
    assert build_candidates(SemanticKey.EMAIL, "abc", req) == ["abc"]
