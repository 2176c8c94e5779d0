from __future__ import annotations

"""
Utilities for dynamic imports.

This module centralizes the logic to load objects from string references
formatted as "module.path:AttrName". It is shared by the CLI and the
classifier plugin loader so both report the same error messages.

Public API:
    - load_object_from_ref(ref): object
"""

import importlib
from typing import Any


def load_object_from_ref(ref: str) -> Any:
    """Load an attribute from a module given a 'module:attr' reference.

    Dotted attribute paths are followed ('pkg.mod:Outer.Inner').

    Args:
        ref: Reference in the form 'module.path:AttrName'.

    Returns:
        The attribute resolved from the given module.

    Raises:
        ImportError: If the reference is malformed or cannot be resolved.
    """
    module_name, sep, obj_name = (ref or '').partition(':')
    if not module_name or not sep or (not obj_name):
        raise ImportError(f"Invalid reference '{ref}'. Expected 'module.path:AttrName'.")
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ImportError(f"Failed to import module '{module_name}': {exc}") from exc
    obj: Any = module
    for part in obj_name.split('.'):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ImportError(f"Module '{module_name}' has no attribute '{obj_name}': {exc}") from exc
    return obj
