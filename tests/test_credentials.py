"""Tests for credential providers."""

import json

from event_roster.credentials import EnvCredentialProvider, FileCredentialStore, StaticCredentialProvider


class TestFileCredentialStore:
    def test_missing_file_returns_none(self, tmp_path):
        store = FileCredentialStore(str(tmp_path / "storage.json"))
        assert store.get_credential() is None

    def test_store_and_read(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        store = FileCredentialStore(str(path), key="jwt")
        store.store_credential("a.b.c")
        assert store.get_credential() == "a.b.c"
        assert json.loads(path.read_text(encoding="utf-8")) == {"jwt": "a.b.c"}

    def test_other_keys_preserved(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        store = FileCredentialStore(str(path))
        store.store_credential("t")
        store.clear()
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}
        assert store.get_credential() is None

    def test_corrupt_file_returns_none(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        assert FileCredentialStore(str(path)).get_credential() is None

    def test_non_string_value_returns_none(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text(json.dumps({"jwt": 123}), encoding="utf-8")
        assert FileCredentialStore(str(path)).get_credential() is None


class TestSimpleProviders:
    def test_static(self):
        assert StaticCredentialProvider("x.y.z").get_credential() == "x.y.z"
        assert StaticCredentialProvider().get_credential() is None

    def test_env(self, monkeypatch):
        provider = EnvCredentialProvider("ROSTER_TEST_TOKEN")
        monkeypatch.delenv("ROSTER_TEST_TOKEN", raising=False)
        assert provider.get_credential() is None
        monkeypatch.setenv("ROSTER_TEST_TOKEN", "x.y.z")
        assert provider.get_credential() == "x.y.z"
