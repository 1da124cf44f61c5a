"""
Mapping helpers for widget configuration.

Widget defaults, per-item overrides and HTML attribute bags are plain
dictionaries; these helpers merge and consume them without sharing state
between widget instances.
"""

import copy
from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional, Union


def merge(base: Optional[Mapping], *overrides: Optional[Mapping]) -> Dict[str, Any]:
    """
    Deep-merge mappings.

    Later mappings win for scalar keys; where both sides hold a mapping the
    two are merged recursively. The result shares no objects with the inputs.

    Example:
        >>> merge({'a': 1, 'b': {'x': 1}}, {'b': {'y': 2}})
        {'a': 1, 'b': {'x': 1, 'y': 2}}
    """
    result = copy.deepcopy(dict(base)) if base else {}
    for override in overrides:
        if not override:
            continue
        for key, value in override.items():
            current = result.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = merge(current, value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def get_value(mapping: Optional[Mapping], key: Union[str, Callable], default: Any = None) -> Any:
    """
    Read a value from a mapping.

    The key is looked up directly first; a dotted key such as ``"image.src"``
    then walks nested mappings. A callable key is called with the mapping.
    """
    if callable(key):
        return key(mapping)
    if not isinstance(mapping, Mapping):
        return default
    if key in mapping:
        return mapping[key]

    if isinstance(key, str) and '.' in key:
        current: Any = mapping
        for part in key.split('.'):
            if not isinstance(current, Mapping) or part not in current:
                return default
            current = current[part]
        return current

    return default


def remove(mapping: Optional[MutableMapping], key: str, default: Any = None) -> Any:
    """Remove ``key`` from the mapping and return its value"""
    if isinstance(mapping, MutableMapping) and key in mapping:
        return mapping.pop(key)
    return default


__all__ = ['merge', 'get_value', 'remove']
