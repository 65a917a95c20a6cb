"""Simple localization: typo-safe message keys and per-language templates.

Main components:
- keys: ``MessageKey`` registries and ``define_messages``
- table: ``MessageTable`` lookup with ``{placeholder}`` substitution
- lazy: ``LazyMessages`` build-once holder for module-level helpers

Missing translations render as ``""`` and unknown placeholders stay
verbatim; nothing on the lookup path raises.
"""

from sl10n.errors import (
    DuplicateMessageKeyError,
    InvalidDefinitionError,
    MissingTranslationError,
    Sl10nError,
)
from sl10n.keys import MessageKey, define_messages
from sl10n.lazy import LazyMessages
from sl10n.substitution import placeholders, substitute
from sl10n.table import MessageTable

__version__ = "0.2.0"

__all__ = [
    "MessageKey",
    "define_messages",
    "MessageTable",
    "LazyMessages",
    "substitute",
    "placeholders",
    "Sl10nError",
    "InvalidDefinitionError",
    "DuplicateMessageKeyError",
    "MissingTranslationError",
]
