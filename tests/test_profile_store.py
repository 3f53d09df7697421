import json

import pytest

from form_autofill.profile_store import ProfileDocumentError, ProfileStore, parse_profile_document

ME_JSON = {
    "activeProfileId": None,
    "profiles": [
        {"id": "personal", "name": "個人", "data": {"familyNameKanji": "山田", "email": "taro@example.com"}},
        {"id": "work", "name": "仕事", "data": {"company": "Example KK"}},
    ],
}


@pytest.fixture
def store(tmp_path):
    return ProfileStore(tmp_path / "store" / "autofill_data.json")


def test_empty_store(store):
    assert store.load() is None
    assert store.list_profiles() == []
    assert store.export_current() == {"activeProfileId": None, "profiles": []}


def test_import_defaults_active_to_first_profile(store):
    result = store.import_from(json.dumps(ME_JSON, ensure_ascii=False))
    assert result.ok is True
    assert result.error is None
    assert store.get_active_profile_id() == "personal"
    assert store.list_profiles() == [
        {"id": "personal", "name": "個人"},
        {"id": "work", "name": "仕事"},
    ]
    loaded = store.load()
    assert loaded["id"] == "personal"
    assert loaded["data"]["familyNameKanji"] == "山田"


def test_import_keeps_explicit_active(store):
    store.import_from({**ME_JSON, "activeProfileId": "work"})
    assert store.load()["id"] == "work"


def test_import_rejects_missing_profiles(store):
    result = store.import_from('{"activeProfileId": "x"}')
    assert result.ok is False
    assert result.error == "Invalid me.json: profiles missing"
    assert not store.path.exists()


def test_import_rejects_non_list_profiles(store):
    result = store.import_from({"profiles": {"id": "a"}})
    assert result.ok is False
    assert "profiles missing" in result.error


def test_import_rejects_invalid_json(store):
    result = store.import_from("{not json")
    assert result.ok is False
    assert result.error.startswith("Invalid me.json")


def test_import_accepts_profiles_without_id(store):
    result = store.import_from({"profiles": [{"name": "me", "data": {"email": "me@example.com"}}, {"id": "  "}]})
    assert result.ok is True
    assert store.get_active_profile_id() is None
    assert store.list_profiles() == [{"id": None, "name": "me"}, {"id": None, "name": None}]
    # アクティブ未設定のため先頭プロフィール
    assert store.load()["data"] == {"email": "me@example.com"}


def test_import_coerces_non_string_name(store):
    result = store.import_from({"profiles": [{"id": "a", "name": 1}]})
    assert result.ok is True
    assert store.list_profiles() == [{"id": "a", "name": "1"}]


def test_export_keeps_unknown_keys(store):
    document = {
        "activeProfileId": "a",
        "version": 2,
        "profiles": [{"id": "a", "name": "A", "color": "red", "data": {"city": "札幌市"}}],
    }
    assert store.import_from(document).ok is True
    exported = store.export_current()
    assert exported["version"] == 2
    assert exported["profiles"][0]["color"] == "red"
    assert exported == document


def test_import_replaces_previous_document(store):
    store.import_from(ME_JSON)
    store.import_from({"profiles": [{"id": "only"}]})
    assert [p["id"] for p in store.list_profiles()] == ["only"]
    assert store.load() == {"id": "only", "name": None, "data": {}}


def test_set_active_and_clear(store):
    store.import_from(ME_JSON)
    store.set_active("work")
    assert store.get_active_profile_id() == "work"
    assert store.load()["id"] == "work"

    store.set_active("")
    assert store.get_active_profile_id() is None
    # アクティブ未設定時は先頭プロフィール
    assert store.load()["id"] == "personal"


def test_export_round_trips_stored_document(store):
    store.import_from(ME_JSON)
    exported = store.export_current()
    assert exported["activeProfileId"] == "personal"
    assert exported["profiles"][1] == {"id": "work", "name": "仕事", "data": {"company": "Example KK"}}


def test_file_layout_uses_storage_key(tmp_path):
    path = tmp_path / "data.json"
    ProfileStore(path, storage_key="custom_key").import_from(ME_JSON)
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert list(raw) == ["custom_key"]
    assert raw["custom_key"]["activeProfileId"] == "personal"


def test_corrupted_store_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(ProfileDocumentError):
        ProfileStore(path).list_profiles()


def test_parse_profile_document_coerces_ids():
    document = parse_profile_document({"activeProfileId": "", "profiles": [{"id": 1, "data": None}]})
    assert document.profiles[0].id == "1"
    assert document.profiles[0].data == {}
    assert document.activeProfileId == "1"

    stored = parse_profile_document({"activeProfileId": "", "profiles": [{"id": 1}]}, default_active=False)
    assert stored.activeProfileId is None
