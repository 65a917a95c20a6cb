"""Messages owned by the first module."""

from __future__ import annotations

from collections.abc import Mapping

from sl10n import LazyMessages, MessageKey


class Msg(MessageKey):
    Greeting = {"en": "Hello!", "ru": "Привет!", "es": "¡Hola!"}
    Farewell = {"en": "Goodbye, {name}.", "ru": "Пока, {name}.", "es": "Adiós, {name}."}


# Built on the first t() call, once.
MSGS = LazyMessages(Msg)


def t(msg: Msg, lang: str, params: Mapping[str, object] | None = None) -> str:
    return MSGS.get_msg(msg, lang, params)
