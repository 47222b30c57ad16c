"""Tests for the file-backed translation store."""

import shutil
from pathlib import Path

import pytest

from conftest import write_json
from lingon.core.errors import TranslationLoadError
from lingon.infra.store import TranslationStore, to_dotted_name


@pytest.fixture
def store(languages):
    s = TranslationStore(languages)
    s.reload()
    return s


class TestDottedName:
    def test_nested(self):
        assert to_dotted_name(Path("command") / "help.json") == "command.help"

    def test_upper_case_extension(self):
        assert to_dotted_name(Path("menu.JSON")) == "menu"


class TestLoad:
    def test_locales_discovered(self, store):
        assert store.loaded_locales() == frozenset({"zh_TW", "en_US"})
        assert len(store) == 2
        assert "zh_TW" in store

    def test_documents_named_by_relative_path(self, store):
        assert set(store.get("zh_TW")) == {"b.test", "command.help"}
        assert store.get("zh_TW")["command.help"] == {"title": "說明"}

    def test_missing_root_is_empty(self, tmp_path):
        s = TranslationStore(tmp_path / "absent")
        assert s.load() == {}
        s.reload()
        assert s.loaded_locales() == frozenset()

    def test_stray_entries_ignored(self, languages, store):
        write_json(languages / "zh" / "x.json", {"a": 1})
        write_json(languages / "EN_us" / "x.json", {"a": 1})
        write_json(languages / "top.json", {"a": 1})
        store.reload()
        assert store.loaded_locales() == frozenset({"zh_TW", "en_US"})

    def test_only_json_files(self, languages, store):
        (languages / "en_US" / "notes.txt").write_text("ignored", encoding="utf-8")
        write_json(languages / "en_US" / "extra.JSON", {"k": "v"})
        store.reload()
        assert set(store.get("en_US")) == {"b.test", "extra"}

    def test_tables_are_read_only(self, store):
        with pytest.raises(TypeError):
            store.get("en_US")["new"] = {}

    def test_unknown_locale_is_empty(self, store):
        assert dict(store.get("fr_FR")) == {}
        assert dict(store.get(None)) == {}

    def test_malformed_json_is_fatal(self, languages):
        bad = languages / "en_US" / "broken.json"
        bad.write_text("{not json", encoding="utf-8")
        s = TranslationStore(languages)
        with pytest.raises(TranslationLoadError) as exc_info:
            s.reload()
        assert exc_info.value.path == bad
        assert s.loaded_locales() == frozenset()

    def test_failed_reload_keeps_previous_tables(self, languages, store):
        (languages / "en_US" / "broken.json").write_text("[", encoding="utf-8")
        with pytest.raises(TranslationLoadError):
            store.reload()
        assert store.loaded_locales() == frozenset({"zh_TW", "en_US"})


class TestReloadLocale:
    def test_replaces_one_table(self, languages, store):
        old = store.get("en_US")
        write_json(languages / "en_US" / "b" / "test.json", {"greeting": "Hey"})
        assert store.reload_locale("en_US") is True
        assert store.get("en_US")["b.test"] == {"greeting": "Hey"}
        # Tables handed out earlier are untouched
        assert old["b.test"]["greeting"] == "Hello {name}"

    def test_deleted_directory_removed(self, languages, store):
        shutil.rmtree(languages / "en_US")
        assert store.reload_locale("en_US") is False
        assert store.loaded_locales() == frozenset({"zh_TW"})

    def test_empty_directory_removed(self, languages, store):
        shutil.rmtree(languages / "en_US")
        (languages / "en_US").mkdir()
        assert store.reload_locale("en_US") is False
        assert "en_US" not in store

    def test_new_locale_added(self, languages, store):
        write_json(languages / "ja_JP" / "menu.json", {"start": "開始"})
        assert store.reload_locale("ja_JP") is True
        assert "ja_JP" in store.loaded_locales()
