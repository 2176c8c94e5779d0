from __future__ import annotations

import threading

import pytest

from adante.plugins import registry
from adante.utils.imports import load_object_from_ref
from keytypes import ActionType, FlagType


def test_register_and_resolve_plugin():
    registry.register_classifier("Flags", lambda: FlagType)
    assert registry.get_classifier("flags") is not None
    clf = registry.resolve_classifier("plugin: FLAGS ")
    assert clf("-v") is FlagType.VERBOSE
    assert "flags" in registry.available_classifiers()


def test_register_rejects_empty_name():
    with pytest.raises(ValueError):
        registry.register_classifier("  ", lambda: FlagType)


def test_register_rejects_non_callable_factory():
    with pytest.raises(TypeError):
        registry.register_classifier("x", FlagType.HELP)


def test_unregister():
    registry.register_classifier("tmp", lambda: FlagType)
    registry.unregister_classifier("TMP")
    assert registry.get_classifier("tmp") is None


def test_unknown_plugin():
    with pytest.raises(KeyError, match="nope"):
        registry.resolve_classifier("plugin:nope")


def test_resolve_module_reference():
    clf = registry.resolve_classifier("keytypes:ActionType")
    assert clf("r") is ActionType.REMOVE


def test_env_plugins_bootstrap(monkeypatch):
    monkeypatch.setenv(
        "ADANTE_CLASSIFIER_PLUGINS",
        "keytypes:register_test_keys, keytypes:broken_registrar, nowhere:thing, keytypes:FlagType.HELP",
    )
    names = registry.available_classifiers()
    assert "test-flags" in names
    assert "test-actions" in names
    assert registry.resolve_classifier("plugin:test-actions")("a") is ActionType.ADD


def test_load_object_from_ref_errors():
    with pytest.raises(ImportError, match="Expected"):
        load_object_from_ref("no-colon")
    with pytest.raises(ImportError, match="Failed to import"):
        load_object_from_ref("surely_missing_module_xyz:Thing")
    with pytest.raises(ImportError, match="no attribute"):
        load_object_from_ref("keytypes:Missing")


def test_load_object_follows_dotted_attributes():
    assert load_object_from_ref("keytypes:FlagType.PRINT") is FlagType.PRINT


def test_registrar_may_query_registry_during_bootstrap(monkeypatch):
    monkeypatch.setenv("ADANTE_CLASSIFIER_PLUGINS", "keytypes:reentrant_registrar")
    names = registry.available_classifiers()
    assert names == ["inner-saw-outer", "outer"]


def test_concurrent_readers_wait_for_complete_bootstrap(monkeypatch):
    monkeypatch.setenv("ADANTE_CLASSIFIER_PLUGINS", "keytypes:slow_registrar")
    seen = []

    def reader() -> None:
        seen.append(registry.available_classifiers())

    threads = [threading.Thread(target=reader) for _ in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert seen == [["first", "second"]] * 6
