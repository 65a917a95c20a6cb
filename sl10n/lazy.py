"""Process-wide, lazily built message tables.

Preferred usage is to build a ``MessageTable`` at start-up and pass it to
whatever needs it.  When a module wants a ready-made ``t()`` helper
instead, ``LazyMessages`` builds the table on first use, exactly once,
even if several threads ask for it at the same moment.

Usage::

    MSGS = LazyMessages(Msg)

    def t(key: Msg, lang: str, params: Mapping[str, object] | None = None) -> str:
        return MSGS.get_msg(key, lang, params)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Generic

from sl10n.table import K, MessageTable

logger = logging.getLogger(__name__)


class LazyMessages(Generic[K]):
    """Thread-safe, build-once holder for a ``MessageTable``.

    Args:
        keys: Registry to build the table from.
        factory: Optional zero-argument callable returning the table.
            Defaults to ``MessageTable(keys)``.
    """

    def __init__(
        self,
        keys: type[K],
        factory: Callable[[], MessageTable[K]] | None = None,
    ) -> None:
        self._keys = keys
        self._factory = factory or (lambda: MessageTable(keys))
        self._table: MessageTable[K] | None = None
        self._lock = threading.Lock()

    def get(self) -> MessageTable[K]:
        """Return the table, building it on the first call."""
        table = self._table
        if table is not None:
            return table

        with self._lock:
            if self._table is None:
                logger.debug(
                    "Building message table",
                    extra={"event": "lazy_table_init", "table": self._keys.__name__},
                )
                self._table = self._factory()
            return self._table

    @property
    def initialized(self) -> bool:
        """``True`` once the table has been built."""
        return self._table is not None

    def get_msg(
        self,
        key: K,
        lang: str,
        params: Mapping[str, object] | None = None,
    ) -> str:
        """Shortcut for ``self.get().get_msg(...)``."""
        return self.get().get_msg(key, lang, params)

    def __repr__(self) -> str:
        state = "built" if self.initialized else "pending"
        return f"{type(self).__name__}({self._keys.__name__}, {state})"
