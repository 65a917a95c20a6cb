"""Message table: immutable key → language → template lookup.

Lookup behaviour:
- Unknown *lang* for a key → ``""`` (no fallback language).
- Key not in this table (e.g. a key from another registry) → ``""``.
- Placeholders without a matching parameter stay verbatim.

``get_msg`` never raises.  Host programs that want a hard failure on a
missing translation use ``require_msg`` or check ``has_msg`` first.

Usage::

    from sl10n import MessageKey, MessageTable

    class Msg(MessageKey):
        Greeting = {"en": "Hello!", "es": "¡Hola!"}
        Farewell = {"en": "Goodbye, {name}.", "es": "Adiós, {name}."}

    msgs = MessageTable(Msg)
    msgs.msg(Msg.Greeting, "en")                         # → "Hello!"
    msgs.dyn_msg(Msg.Farewell, "es", {"name": "Alice"})  # → "Adiós, Alice."
    msgs.msg(Msg.Greeting, "fr")                         # → ""
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from pydantic import ValidationError

from sl10n.core.config import get_settings
from sl10n.errors import MissingTranslationError
from sl10n.keys import MessageKey
from sl10n.substitution import placeholders, substitute

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=MessageKey)

_NO_LANGS: Mapping[str, str] = MappingProxyType({})


class MessageTable(Generic[K]):
    """All translations of one registry, built once and never mutated.

    The table is generic over its registry, so a type checker rejects
    ``MessageTable[first.Msg].msg(second.Msg.Greeting, ...)``.

    Args:
        keys: The ``MessageKey`` subclass to build the table from.
        log_misses: Log soft misses at WARNING instead of DEBUG.
            Defaults to ``Settings.LOG_MISSES``, read on the first miss so
            that building a table never depends on the environment.
    """

    def __init__(self, keys: type[K], *, log_misses: bool | None = None) -> None:
        self._keys = keys
        self._messages: Mapping[K, Mapping[str, str]] = MappingProxyType(
            {key: key.translations for key in keys}
        )
        self._log_misses = log_misses

        logger.debug(
            "Message table built",
            extra={
                "event": "table_built",
                "table": keys.__name__,
                "keys": len(self._messages),
                "languages": self.languages(),
            },
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_msg(
        self,
        key: K,
        lang: str,
        params: Mapping[str, object] | None = None,
    ) -> str:
        """Return the template for *key* in *lang* with *params* substituted.

        Args:
            key: A member of this table's registry.
            lang: Language code, matched exactly (case-sensitive).
            params: Optional ``{placeholder: value}`` mapping.

        Returns:
            The rendered message, or ``""`` when the key has no template
            for *lang*.
        """
        template = self._template(key, lang)
        if template is None:
            self._log_miss(key, lang)
            return ""
        return substitute(template, params)

    def msg(self, key: K, lang: str) -> str:
        """Static lookup, no substitution."""
        return self.get_msg(key, lang, None)

    def dyn_msg(self, key: K, lang: str, params: Mapping[str, object]) -> str:
        """Lookup with placeholder substitution."""
        return self.get_msg(key, lang, params)

    def has_msg(self, key: K, lang: str) -> bool:
        """Return ``True`` if *key* has a template for *lang*."""
        return self._template(key, lang) is not None

    def require_msg(
        self,
        key: K,
        lang: str,
        params: Mapping[str, object] | None = None,
    ) -> str:
        """Like ``get_msg`` but raise instead of returning ``""``.

        Raises:
            MissingTranslationError: *key* has no template for *lang*.
        """
        if not self.has_msg(key, lang):
            raise MissingTranslationError(_key_name(key), lang)
        return self.get_msg(key, lang, params)

    def _template(self, key: object, lang: object) -> str | None:
        try:
            return self._messages.get(key, _NO_LANGS).get(lang)  # type: ignore[call-overload]
        except TypeError:
            # Unhashable key or lang: nothing can match.
            return None

    def _miss_level(self) -> int:
        if self._log_misses is None:
            try:
                self._log_misses = get_settings().LOG_MISSES
            except ValidationError:
                logger.warning(
                    "Invalid sl10n settings, logging misses at DEBUG",
                    exc_info=True,
                    extra={"event": "settings_invalid", "table": self._keys.__name__},
                )
                self._log_misses = False
        return logging.WARNING if self._log_misses else logging.DEBUG

    def _log_miss(self, key: object, lang: object) -> None:
        logger.log(
            self._miss_level(),
            "No translation for %s in %r",
            _key_name(key),
            lang,
            extra={
                "event": "message_miss",
                "table": self._keys.__name__,
                "message_key": _key_name(key),
                "lang": lang,
            },
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def keys(self) -> type[K]:
        """The registry this table was built from."""
        return self._keys

    def languages(self, key: K | None = None) -> list[str]:
        """Sorted language codes of *key*, or of the whole table."""
        if key is not None:
            return sorted(self._messages.get(key, _NO_LANGS))
        langs: set[str] = set()
        for translations in self._messages.values():
            langs.update(translations)
        return sorted(langs)

    def missing_translations(self) -> dict[K, list[str]]:
        """Map each key to the table languages it has no template for.

        Keys with full coverage are omitted.  Asymmetric coverage is
        allowed; this only reports it.
        """
        all_langs = set(self.languages())
        missing: dict[K, list[str]] = {}
        for key, translations in self._messages.items():
            gaps = all_langs.difference(translations)
            if gaps:
                missing[key] = sorted(gaps)
        return missing

    def placeholder_mismatches(self) -> dict[K, dict[str, set[str]]]:
        """Return keys whose languages use different placeholder sets.

        Each value maps language code → placeholder names for that key.
        """
        mismatched: dict[K, dict[str, set[str]]] = {}
        for key, translations in self._messages.items():
            found = {lang: placeholders(template) for lang, template in translations.items()}
            if len({frozenset(names) for names in found.values()}) > 1:
                mismatched[key] = found
        return mismatched

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[K]:
        return iter(self._messages)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._messages
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._keys.__name__}, keys={len(self)})"


def _key_name(key: object) -> str:
    return key.name if isinstance(key, MessageKey) else repr(key)
