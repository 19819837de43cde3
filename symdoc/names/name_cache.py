"""
Bounded, thread-safe cache of resolved type names.
"""

import threading
from typing import Dict, Optional, Tuple

from .. import logger


class NameCache:
    """
    Maps a type reference to its resolved display name, or to a failure marker.

    The cache is cleared wholesale when storing a new entry would exceed
    max_size. One instance is shared by every module of a generation run.
    """

    FAILED = object()

    def __init__(self, max_size: int = 1000):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._entries: Dict[str, object] = {}
        self._lock = threading.Lock()

    def lookup(self, reference: str) -> Tuple[bool, Optional[str]]:
        """
        Look up a reference.

        Returns:
            (hit, name): hit is False when the reference was never stored; name
            is None for a cached failure
        """
        with self._lock:
            if reference not in self._entries:
                return False, None
            value = self._entries[reference]
        return True, None if value is self.FAILED else value

    def store(self, reference: str, name: Optional[str]):
        """Store a resolved name, or a failure when name is None."""
        with self._lock:
            if reference not in self._entries and len(self._entries) >= self.max_size:
                logger.debug(f"Name cache reached {self.max_size} entries, clearing")
                self._entries.clear()
            self._entries[reference] = self.FAILED if name is None else name

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __contains__(self, reference: str) -> bool:
        with self._lock:
            return reference in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
