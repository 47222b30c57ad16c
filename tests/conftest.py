"""
Shared fixtures: on-disk language trees and a throwaway owner package.
"""

import importlib
import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env():
    """Keep LINGON_* and LOG_* values from the host out of the tests"""
    env = {k: v for k, v in os.environ.items() if not k.startswith(("LINGON_", "LOG_"))}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def root(tmp_path):
    return tmp_path / "lingon"


@pytest.fixture
def languages(root):
    """Two locales: zh_TW is the default, en_US is partially translated."""
    base = root / "languages"
    write_json(base / "zh_TW" / "b" / "test.json", {
        "a": {"chat": ["你好", "再見"]},
        "greeting": "你好 {name}",
        "only_default": "預設",
    })
    write_json(base / "zh_TW" / "command" / "help.json", {"title": "說明"})
    write_json(base / "en_US" / "b" / "test.json", {
        "a": {"chat": ["hi", "bye"]},
        "greeting": "Hello {name}",
        "nothing": None,
        "count": 3,
        "flags": {"on": True},
    })
    return base


@pytest.fixture
def owner_package(tmp_path, monkeypatch):
    """An importable package shipping languages/ resources."""
    pkg_root = tmp_path / "site"
    pkg = pkg_root / "demo_owner"
    pkg.mkdir(parents=True)
    (pkg / "__init__.py").write_text("", encoding="utf-8")
    write_json(pkg / "languages" / "en_US" / "menu.json", {"start": "Start"})
    write_json(pkg / "languages" / "en_US" / "command" / "help.json", {"title": "Help"})
    write_json(pkg / "languages" / "ja_JP" / "menu.json", {"start": "開始"})
    (pkg / "languages" / "README.txt").write_text("not a translation", encoding="utf-8")
    monkeypatch.syspath_prepend(str(pkg_root))
    monkeypatch.delitem(sys.modules, "demo_owner", raising=False)
    importlib.invalidate_caches()
    return "demo_owner"
