from __future__ import annotations

"""
Minimal plugin registry for named key classifiers with lazy bootstrap.

This registry provides:
- `register_classifier(name, factory)`
- `get_classifier(name)`
- `available_classifiers()`
- `resolve_classifier(ref)` for CLI-style references:
    * 'plugin:<name>'        → registry lookup
    * 'module.path:AttrName' → dynamic import (enum, mapping, callable...)

Plugins are loaded the first time the registry is queried:
    * entry-points group 'adante.classifiers' → each entry provides a
      callable like `def register(registry_module) -> None: ...`
    * env var ADANTE_CLASSIFIER_PLUGINS: comma-separated 'module:callable'
      references that will be imported and called in order.

A plugin that fails to load is logged and skipped; it never prevents the
remaining plugins from registering.
"""

import os
import sys
import threading
from typing import Any, Callable, Dict, List, Optional

from adante.logging.helpers import get_logger
from adante.parsing.classifiers import as_classifier
from adante.utils.imports import load_object_from_ref

logger = get_logger('plugins')

ENTRY_POINT_GROUP = 'adante.classifiers'
PLUGIN_PREFIX = 'plugin:'

_CLASSIFIER_FACTORIES: Dict[str, Callable[[], Any]] = {}
_BOOTSTRAPPED = False
_BOOTSTRAPPING = False
_LOCK = threading.RLock()


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def register_classifier(name: str, factory: Callable[[], Any]) -> None:
    """Register *factory* under *name*; it must return something `as_classifier` accepts."""
    key = _normalize(name)
    if not key:
        raise ValueError('classifier name must be non-empty')
    if not callable(factory):
        raise TypeError(f'classifier factory for {name!r} must be callable')
    _CLASSIFIER_FACTORIES[key] = factory


def unregister_classifier(name: str) -> None:
    _CLASSIFIER_FACTORIES.pop(_normalize(name), None)


def get_classifier(name: str) -> Optional[Callable[[], Any]]:
    _ensure_bootstrapped()
    return _CLASSIFIER_FACTORIES.get(_normalize(name))


def available_classifiers() -> List[str]:
    _ensure_bootstrapped()
    return sorted(_CLASSIFIER_FACTORIES)


def resolve_classifier(ref: str) -> Callable[[str], Any]:
    """Turn a CLI reference into a key classifier.

    Raises:
        KeyError: Unknown 'plugin:<name>'.
        ImportError: Malformed or unresolvable 'module:attr' reference.
        TypeError: The referenced object cannot act as a classifier.
    """
    ref = (ref or '').strip()
    if ref.startswith(PLUGIN_PREFIX):
        name = ref[len(PLUGIN_PREFIX):]
        factory = get_classifier(name)
        if factory is None:
            known = ', '.join(available_classifiers()) or 'none'
            raise KeyError(f'unknown classifier plugin {name.strip()!r} (registered: {known})')
        return as_classifier(factory())
    return as_classifier(load_object_from_ref(ref))


def _call_safely(fn: Callable[[Any], None], origin: str) -> None:
    try:
        fn(sys.modules[__name__])
        logger.info('classifier plugin applied: %s', origin)
    except Exception as exc:
        logger.warning('classifier plugin failed (%s): %s', origin, exc)


def _load_env_plugins() -> None:
    spec = (os.getenv('ADANTE_CLASSIFIER_PLUGINS') or '').strip()
    if not spec:
        return
    for ref in (s.strip() for s in spec.split(',') if s.strip()):
        try:
            fn = load_object_from_ref(ref)
        except ImportError as exc:
            logger.warning('could not import classifier plugin %r: %s', ref, exc)
            continue
        if not callable(fn):
            logger.warning('classifier plugin %r is not callable; skipped', ref)
            continue
        _call_safely(fn, origin=f'env:{ref}')


def _load_entrypoint_plugins() -> None:
    from importlib.metadata import entry_points

    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            fn = ep.load()
        except Exception as exc:
            logger.warning('could not load entry-point %s: %s', ep.name, exc)
            continue
        _call_safely(fn, origin=f'entrypoint:{ep.name}')


def _ensure_bootstrapped() -> None:
    """Load plugins once; other threads wait until every loader has finished.

    A registrar that queries the registry while it runs sees the partial
    registry instead of starting a second bootstrap.
    """
    global _BOOTSTRAPPED, _BOOTSTRAPPING
    if _BOOTSTRAPPED:
        return
    with _LOCK:
        if _BOOTSTRAPPED or _BOOTSTRAPPING:
            return
        _BOOTSTRAPPING = True
        try:
            _load_entrypoint_plugins()
            _load_env_plugins()
        finally:
            _BOOTSTRAPPING = False
        _BOOTSTRAPPED = True


def reset_registry() -> None:
    """Forget every registration and allow plugins to bootstrap again."""
    global _BOOTSTRAPPED
    with _LOCK:
        _CLASSIFIER_FACTORIES.clear()
        _BOOTSTRAPPED = False


__all__ = [
    'ENTRY_POINT_GROUP',
    'available_classifiers',
    'get_classifier',
    'register_classifier',
    'reset_registry',
    'resolve_classifier',
    'unregister_classifier',
]
