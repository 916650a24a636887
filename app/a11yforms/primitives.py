"""Primitive input rendering delegated to Django's widget machinery.

The accessible renderer never builds ``<input>`` tags itself. It asks an
``InputRenderer`` for them and decorates the result, so projects with their own
widget conventions can plug in a different implementation.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Protocol

from django import forms
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


class SearchInput(forms.TextInput):
    input_type = "search"


class TelInput(forms.TextInput):
    input_type = "tel"


class NativeDateInput(forms.DateInput):
    input_type = "date"


INPUT_WIDGETS: Dict[str, type[forms.Widget]] = {
    "text": forms.TextInput,
    "email": forms.EmailInput,
    "number": forms.NumberInput,
    "password": forms.PasswordInput,
    "url": forms.URLInput,
    "search": SearchInput,
    "tel": TelInput,
    "date": NativeDateInput,
}


class RadioOptionInput(forms.widgets.Input):
    """A single ``<input type="radio">``; ``RadioSelect`` only renders whole groups."""

    input_type = "radio"


class InputRenderer(Protocol):
    def render_input(self, name: str, options: Mapping[str, Any]) -> SafeString: ...

    def render_radio_option(
        self,
        name: str,
        value: str,
        display_text: str,
        *,
        option_id: str,
        checked: bool = False,
    ) -> SafeString: ...


def merge_classes(existing: str | None, new: str | None) -> str | None:
    classes = []
    if existing:
        classes.append(existing)
    if new:
        classes.append(new)
    if not classes:
        return None
    # Collapse whitespace and deduplicate while preserving order.
    seen = set()
    ordered = []
    for chunk in " ".join(classes).split():
        if chunk not in seen:
            seen.add(chunk)
            ordered.append(chunk)
    return " ".join(ordered)


def option_id_for(group_id: str, value: Any, index: int = 0) -> str:
    """Return the id of a radio option, e.g. ``type_billing``.

    Values with nothing usable for an id (``"€"``, ``"***"``) fall back to the
    option's position, as ``RadioSelect`` numbers its options.
    """

    suffix = _UNSAFE_ID_CHARS.sub("_", str(value).strip().lower()).strip("_")
    return f"{group_id}_{suffix or index}"


def option_ids_for(group_id: str, values: Iterable[Any]) -> List[str]:
    """Return one id per value, unique within the group and in value order."""

    used: set[str] = set()
    ids: List[str] = []
    for index, value in enumerate(values):
        candidate = option_id_for(group_id, value, index)
        while candidate in used:
            # "A" and "a", or "1.5" and "1,5", slug to the same id.
            candidate = f"{candidate}_{index}"
        used.add(candidate)
        ids.append(candidate)
    return ids


def widget_attrs(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate pass-through render options into widget attributes.

    ``css_class`` becomes ``class`` and underscores in the remaining keys become
    dashes so template keyword arguments such as ``aria_required`` work.
    ``value`` and ``input_type`` are consumed by the renderer and never leak
    into the attribute list. ``None`` values are dropped.
    """

    attrs: Dict[str, Any] = {}
    css_class = None
    for key, value in options.items():
        if key in ("value", "input_type") or value is None:
            continue
        if key in ("css_class", "class"):
            css_class = merge_classes(css_class, str(value))
            continue
        attrs[key.replace("_", "-")] = value
    if css_class:
        attrs["class"] = css_class
    return attrs


class DjangoInputRenderer:
    """Render bare inputs and radio options with stock Django widgets."""

    def __init__(self, widget_classes: Mapping[str, type[forms.Widget]] | None = None):
        self.widget_classes = dict(INPUT_WIDGETS)
        if widget_classes:
            self.widget_classes.update(widget_classes)

    def widget_for(self, input_type: str | None) -> forms.Widget:
        widget_class = self.widget_classes.get(input_type or "text", forms.TextInput)
        return widget_class()

    def render_input(self, name: str, options: Mapping[str, Any]) -> SafeString:
        widget = self.widget_for(options.get("input_type"))
        return mark_safe(widget.render(name, options.get("value"), attrs=widget_attrs(options)))

    def render_radio_option(
        self,
        name: str,
        value: str,
        display_text: str,
        *,
        option_id: str,
        checked: bool = False,
    ) -> SafeString:
        attrs: Dict[str, Any] = {"id": option_id}
        if checked:
            attrs["checked"] = True
        radio = RadioOptionInput().render(name, value, attrs=attrs)
        return format_html('{}<label for="{}">{}</label>', radio, option_id, display_text)
