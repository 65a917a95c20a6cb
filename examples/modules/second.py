"""Messages owned by the second module, built from plain data."""

from __future__ import annotations

from collections.abc import Mapping

from sl10n import LazyMessages, define_messages

Msg = define_messages(
    "Msg",
    {
        "ChangesSaved": {
            "ru": "Изменения сохранены.",
            "en": "Changes saved.",
            "es": "Cambios guardados.",
        },
        "ChangesSavedErr": {
            "ru": "Не удалось сохранить изменения.",
            "en": "Failed to save changes.",
            "es": "No se pudieron guardar los cambios.",
        },
    },
    module=__name__,
)

MSGS = LazyMessages(Msg)


def t(msg: Msg, lang: str, params: Mapping[str, object] | None = None) -> str:  # type: ignore[valid-type]
    return MSGS.get_msg(msg, lang, params)
