"""Two independent registries used side by side.

Run from this directory: ``python main.py``.
"""

from __future__ import annotations

import first
import second

from sl10n.core.logging import setup_logging

# Language codes as constants to avoid typos.
EN = "en"
RU = "ru"
ES = "es"


def main() -> None:
    setup_logging()

    greeting = first.t(first.Msg.Greeting, EN)
    print(greeting)  # Hello!

    farewell = first.t(first.Msg.Farewell, EN, {"name": "Alice"})
    print(farewell)  # Goodbye, Alice.

    saved = second.t(second.Msg.ChangesSaved, ES)
    print(saved)  # Cambios guardados.

    # A key from another registry is never found in this table.
    assert second.t(first.Msg.Greeting, EN) == ""  # type: ignore[arg-type]


if __name__ == "__main__":
    main()
