"""A registry of named objects, each stored with a version number."""

import string
from typing import Any, Dict, List, Optional, Tuple

from qfkit.core import ensure

_WHITESPACE = " \t\n\v\f\r"
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def trim(text: str) -> str:
    """Remove leading and trailing blanks."""
    return text.strip(_WHITESPACE)


def _process_name(name: str) -> str:
    result = trim(name)
    ensure(result, "empty object names not allowed")
    result = result.translate(_UPPER)
    ensure(not any(c in _WHITESPACE for c in result), "blanks not allowed in object names")
    return result


class ObjectRegistry:
    """Maps case-insensitive names to objects; storing under a name bumps its version."""

    def __init__(self) -> None:
        self._entries: Dict[str, Tuple[Any, int]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def names(self) -> List[str]:
        """Names of the stored objects, in sorted order."""
        return sorted(self._entries)

    def contains(self, name: str) -> bool:
        """True if an object is stored under this name."""
        return _process_name(name) in self._entries

    def get(self, name: str) -> Optional[Any]:
        """The object stored under this name, or None."""
        entry = self._entries.get(_process_name(name))
        return entry[0] if entry else None

    def set(self, name: str, obj: Any) -> Tuple[str, int]:
        """Store ``obj`` under ``name``; return the normalised name and new version."""
        key = _process_name(name)
        previous = self._entries.get(key)
        version = (previous[1] if previous else 0) + 1
        self._entries[key] = (obj, version)
        return key, version

    def version(self, name: str) -> int:
        """Version of the object stored under this name, 0 if none."""
        entry = self._entries.get(_process_name(name))
        return entry[1] if entry else 0

    def clear(self) -> None:
        """Remove all objects."""
        self._entries.clear()