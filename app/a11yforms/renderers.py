"""Accessible field rendering.

``AccessibleFieldRenderer`` wraps primitive inputs with the structure screen
readers rely on:

* text inputs sit inside their ``<label>``, after a label-text span, so the
  association holds through DOM containment as well as the ``for`` attribute;
* radio groups sit inside a ``<fieldset>`` whose ``<legend>`` names the group;
* the first validation error, if any, is rendered next to the field.

The primitive inputs themselves come from an ``InputRenderer``
(``DjangoInputRenderer`` by default) passed in at construction time.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Iterable

from django.utils.html import format_html, format_html_join
from django.utils.safestring import SafeString

from .conf import get_setting
from .descriptors import FieldDescriptor, FieldKind, RadioOption
from .exceptions import FieldDescriptorError
from .primitives import DjangoInputRenderer, InputRenderer, option_ids_for

logger = logging.getLogger(__name__)


def _span(css_class: str | None, text: str) -> SafeString:
    if css_class:
        return format_html('<span class="{}">{}</span>', css_class, text)
    return format_html("<span>{}</span>", text)


class AccessibleFieldRenderer:
    """Decorate primitive inputs with labels, legends and inline errors."""

    def __init__(
        self,
        base: InputRenderer | None = None,
        *,
        label_text_class: str | None = None,
        error_text_class: str | None = None,
        legend_class: str | None = None,
        auto_id: str | None = None,
    ) -> None:
        self.base = base if base is not None else DjangoInputRenderer()
        self.label_text_class = (
            label_text_class if label_text_class is not None else get_setting("LABEL_TEXT_CLASS")
        )
        self.error_text_class = (
            error_text_class if error_text_class is not None else get_setting("ERROR_TEXT_CLASS")
        )
        self.legend_class = legend_class if legend_class is not None else get_setting("LEGEND_CLASS")
        self.auto_id = auto_id if auto_id is not None else get_setting("AUTO_ID")

    def id_for(self, descriptor: FieldDescriptor) -> str:
        """Return the id of the input the label or legend points at."""

        if descriptor.id_for_input:
            return descriptor.id_for_input
        if self.auto_id and "%s" in self.auto_id:
            return self.auto_id % descriptor.name
        return descriptor.name

    def with_base(self, base: InputRenderer) -> "AccessibleFieldRenderer":
        """Return a copy that draws primitive inputs with ``base``."""

        clone = copy.copy(self)
        clone.base = base
        return clone

    def render_text_field(self, descriptor: FieldDescriptor, **input_options: Any) -> SafeString:
        """Render ``descriptor`` as a labelled text input.

        ``input_options`` are handed to the primitive renderer untouched apart
        from the computed ``id`` and, when the descriptor carries one, the
        current ``value``.
        """

        self._require_kind(descriptor, FieldKind.TEXT)
        input_id = self.id_for(descriptor)
        options = dict(input_options)
        options["id"] = input_id
        if descriptor.value is not None:
            options.setdefault("value", descriptor.value)

        return format_html(
            '<label for="{}">{}{}{}</label>',
            input_id,
            _span(self.label_text_class, descriptor.human_label),
            self.base.render_input(descriptor.name, options),
            self.render_error(descriptor),
        )

    def render_radio_group(
        self,
        descriptor: FieldDescriptor,
        options: Iterable[RadioOption | tuple[Any, Any]],
    ) -> SafeString:
        """Render ``options`` as radio buttons grouped under a legend.

        Options keep the order given; the one matching ``descriptor.value`` is
        checked.
        """

        self._require_kind(descriptor, FieldKind.RADIO_GROUP)
        choices = [RadioOption.coerce(option) for option in options]
        option_ids = option_ids_for(self.id_for(descriptor), [choice.value for choice in choices])
        selected = None if descriptor.value is None else str(descriptor.value)

        buttons = format_html_join(
            "",
            "{}",
            (
                (
                    self.base.render_radio_option(
                        descriptor.name,
                        choice.value,
                        choice.display_text,
                        option_id=option_id,
                        checked=choice.value == selected,
                    ),
                )
                for choice, option_id in zip(choices, option_ids)
            ),
        )
        return self.render_fieldset(descriptor, buttons)

    def render_fieldset(self, descriptor: FieldDescriptor, content: SafeString) -> SafeString:
        """Wrap already rendered group ``content`` in a fieldset named by a legend."""

        return format_html(
            "<fieldset>{}{}{}</fieldset>",
            self.render_legend(descriptor),
            content,
            self.render_error(descriptor),
        )

    def render_legend(self, descriptor: FieldDescriptor) -> SafeString:
        if self.legend_class:
            return format_html('<legend class="{}">{}</legend>', self.legend_class, descriptor.human_label)
        return format_html("<legend>{}</legend>", descriptor.human_label)

    def render_error(self, descriptor: FieldDescriptor) -> SafeString | str:
        """Return the error span for the first error, or ``""`` without errors."""

        message = descriptor.first_error
        if message is None:
            return ""
        if len(descriptor.errors) > 1:
            logger.debug(
                "Field %s has %d errors; rendering only the first",
                descriptor.name,
                len(descriptor.errors),
            )
        return _span(self.error_text_class, message)

    def render_form_errors(self, messages: Iterable[str]) -> SafeString:
        """Render errors that belong to no visible field, one span per message."""

        return format_html_join("", "{}", ((_span(self.error_text_class, message),) for message in messages))

    @staticmethod
    def _require_kind(descriptor: FieldDescriptor, kind: FieldKind) -> None:
        if not isinstance(descriptor, FieldDescriptor):
            raise FieldDescriptorError(f"Expected a FieldDescriptor, got {descriptor!r}")
        if descriptor.kind is not kind:
            raise FieldDescriptorError(
                f"Field {descriptor.name!r} is a {descriptor.kind.value} field, not {kind.value}"
            )
