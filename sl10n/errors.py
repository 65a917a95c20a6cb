"""Exceptions raised by sl10n.

Only definition-time problems and the opt-in strict lookup raise.
The regular lookup path (``MessageTable.get_msg``) never does.
"""

from __future__ import annotations


class Sl10nError(Exception):
    """Base class for all sl10n errors."""


class InvalidDefinitionError(Sl10nError, ValueError):
    """A message definition is not a non-empty ``{lang: template}`` mapping."""


class DuplicateMessageKeyError(Sl10nError, ValueError):
    """The same message identifier was declared twice in one registry."""

    def __init__(self, registry: str, name: str) -> None:
        super().__init__(f"{registry}: message key {name!r} is declared more than once")
        self.registry = registry
        self.name = name


class MissingTranslationError(Sl10nError, LookupError):
    """Raised by ``MessageTable.require_msg`` when a (key, lang) pair is absent."""

    def __init__(self, key: str, lang: str) -> None:
        super().__init__(f"No translation for {key!r} in language {lang!r}")
        self.key = key
        self.lang = lang
