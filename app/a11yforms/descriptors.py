"""Immutable descriptions of the fields handed to the accessible renderers."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from .exceptions import FieldDescriptorError

_WORD_SEPARATORS = re.compile(r"[_\-\s]+")


def humanize(name: str) -> str:
    """Turn ``street_address`` into ``Street Address``.

    A trailing ``_id`` is dropped so foreign key style names read naturally.
    """

    text = str(name).strip()
    if text.endswith("_id"):
        text = text[: -len("_id")]
    words = [word for word in _WORD_SEPARATORS.split(text) if word]
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


class FieldKind(str, Enum):
    TEXT = "text"
    RADIO_GROUP = "radio_group"
    CHECKBOX_GROUP = "checkbox_group"


@dataclass(frozen=True)
class RadioOption:
    """One choice inside a radio group."""

    value: str
    display_text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", str(self.value))
        object.__setattr__(self, "display_text", str(self.display_text))

    @classmethod
    def coerce(cls, option: Any) -> "RadioOption":
        """Accept either a ``RadioOption`` or a ``(value, display_text)`` pair."""

        if isinstance(option, cls):
            return option
        if isinstance(option, (tuple, list)) and len(option) == 2:
            value, display_text = option
            return cls(value=value, display_text=display_text)
        raise FieldDescriptorError(
            f"Radio options must be RadioOption instances or (value, text) pairs, got {option!r}"
        )


@dataclass(frozen=True)
class FieldDescriptor:
    """Everything the renderer needs to know about a single field.

    ``errors`` may be any iterable of messages; it is stored as a tuple so the
    descriptor stays hashable and cannot change between renders.
    """

    name: str
    kind: FieldKind = FieldKind.TEXT
    errors: tuple[str, ...] = field(default=())
    human_label: str | None = None
    value: Any = None
    id_for_input: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise FieldDescriptorError("Field descriptors require a non-empty name")
        try:
            kind = FieldKind(self.kind)
        except ValueError as exc:
            raise FieldDescriptorError(f"Unknown field kind {self.kind!r}") from exc
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "errors", _normalise_errors(self.errors))
        if self.human_label is None:
            object.__setattr__(self, "human_label", humanize(self.name))

    @property
    def first_error(self) -> str | None:
        return self.errors[0] if self.errors else None


def _normalise_errors(errors: Iterable[Any] | None) -> tuple[str, ...]:
    if errors is None:
        return ()
    if isinstance(errors, str):
        return (errors,)
    return tuple(str(message) for message in errors)
