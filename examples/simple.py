"""Single message table: static and parameterized lookups."""

from __future__ import annotations

from sl10n import MessageKey, MessageTable
from sl10n.core.logging import setup_logging


class Msg(MessageKey):
    Greeting = {"en": "Hello!", "ru": "Привет!", "es": "¡Hola!"}
    Farewell = {"en": "Goodbye, {name}.", "ru": "До свидания, {name}.", "es": "Adiós, {name}."}


def main() -> None:
    setup_logging()

    msgs = MessageTable(Msg)
    greeting = msgs.msg(Msg.Greeting, "en")
    farewell = msgs.dyn_msg(Msg.Farewell, "es", {"name": "Alice"})

    assert greeting == "Hello!"
    assert farewell == "Adiós, Alice."
    print(greeting)
    print(farewell)


if __name__ == "__main__":
    main()
