"""Message key registries.

A registry is a ``MessageKey`` subclass: an ``Enum`` whose members are the
message identifiers and whose member values are the per-language
templates.  The member set is closed once the class body finishes, so a
mistyped key (``Msg.Greting``) fails immediately instead of silently
returning nothing.

Usage::

    from sl10n import MessageKey

    class Msg(MessageKey):
        Greeting = {"en": "Hello!", "es": "¡Hola!"}
        Farewell = {"en": "Goodbye, {name}.", "es": "Adiós, {name}."}

    Msg.Farewell.as_str()          # → "Farewell"
    Msg.Farewell.translations["es"]  # → "Adiós, {name}."
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated

from pydantic import Field, StrictStr, TypeAdapter, ValidationError

from sl10n.errors import DuplicateMessageKeyError, InvalidDefinitionError

# A definition value: a non-empty mapping of language code → template.
_TRANSLATIONS: TypeAdapter[dict[str, str]] = TypeAdapter(
    Annotated[dict[StrictStr, StrictStr], Field(min_length=1)]
)

Definition = Mapping[str, Mapping[str, str]] | Iterable[tuple[str, Mapping[str, str]]]


class MessageKey(Enum):
    """Base class for message key registries.

    Members are numbered in declaration order, so two keys that happen to
    share identical translations remain distinct members.

    Attributes:
        translations: Read-only ``{lang: template}`` mapping for the key.
    """

    translations: Mapping[str, str]

    def __new__(cls, translations: Mapping[str, str]) -> MessageKey:
        try:
            validated = _TRANSLATIONS.validate_python(translations)
        except ValidationError as exc:
            raise InvalidDefinitionError(
                f"{cls.__name__}: translations must be a non-empty mapping of "
                f"language code to template string ({exc.error_count()} error(s))"
            ) from exc

        member = object.__new__(cls)
        member._value_ = len(cls.__members__) + 1
        member.translations = MappingProxyType(validated)
        return member

    def __init__(self, translations: Mapping[str, str]) -> None:
        # _name_ is assigned before __init__ runs.
        if self._name_ in _RESERVED_NAMES:
            raise InvalidDefinitionError(
                f"{type(self).__name__}: {self._name_!r} is reserved by MessageKey"
            )

    def as_str(self) -> str:
        """Return the declared identifier, e.g. ``"Greeting"``."""
        return self.name


# Public MessageKey methods; a member with one of these names would shadow it.
_RESERVED_NAMES = frozenset(
    attr for attr, value in vars(MessageKey).items() if callable(value) and not attr.startswith("_")
)


def define_messages(
    name: str,
    definition: Definition,
    *,
    module: str | None = None,
) -> type[MessageKey]:
    """Build a registry from plain data instead of a class body.

    Args:
        name: Class name of the generated registry (e.g. ``"Msg"``).
        definition: ``{identifier: {lang: template}}`` or an iterable of
            ``(identifier, {lang: template})`` pairs.
        module: Module name recorded on the generated class (for pickling).

    Returns:
        A new ``MessageKey`` subclass.

    Raises:
        DuplicateMessageKeyError: An identifier appears more than once.
        InvalidDefinitionError: An identifier is not a public Python name,
            shadows a MessageKey method, or its translations are not a
            non-empty ``{str: str}`` mapping.
    """
    items = list(definition.items()) if isinstance(definition, Mapping) else list(definition)

    seen: set[str] = set()
    for key_name, _ in items:
        if not isinstance(key_name, str) or not key_name.isidentifier() or key_name.startswith("_"):
            raise InvalidDefinitionError(f"{name}: invalid message identifier {key_name!r}")
        if key_name in _RESERVED_NAMES:
            raise InvalidDefinitionError(f"{name}: {key_name!r} is reserved by MessageKey")
        if key_name in seen:
            raise DuplicateMessageKeyError(name, key_name)
        seen.add(key_name)

    return MessageKey(name, items, module=module)  # type: ignore[return-value]
