"""Bridge Django bound fields to the accessible renderer."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from django import forms
from django.forms.boundfield import BoundField
from django.utils.safestring import SafeString, mark_safe
from django.utils.translation import gettext

from .descriptors import FieldDescriptor, FieldKind, RadioOption
from .exceptions import FieldDescriptorError
from .primitives import DjangoInputRenderer, widget_attrs
from .renderers import AccessibleFieldRenderer


class BoundFieldInputRenderer(DjangoInputRenderer):
    """Draw the input with the bound field's own widget.

    Textareas, selects, checkboxes and custom widgets keep their markup and
    the field keeps its value and ``required`` handling; only the attributes
    passed in the render options are added.
    """

    def __init__(self, bound_field: BoundField):
        super().__init__()
        self.bound_field = bound_field

    def render_input(self, name: str, options: Mapping[str, Any]) -> SafeString:
        return self.bound_field.as_widget(attrs=widget_attrs(options))


def kind_for(bound_field: BoundField) -> FieldKind:
    widget = bound_field.field.widget
    # CheckboxSelectMultiple subclasses RadioSelect but allows several values.
    if isinstance(widget, forms.CheckboxSelectMultiple):
        return FieldKind.CHECKBOX_GROUP
    if isinstance(widget, forms.RadioSelect):
        return FieldKind.RADIO_GROUP
    return FieldKind.TEXT


def descriptor_for(bound_field: BoundField) -> FieldDescriptor:
    """Describe ``bound_field`` using its own name, label, value and errors."""

    kind = kind_for(bound_field)
    if kind is FieldKind.TEXT:
        input_id = bound_field.id_for_label or bound_field.auto_id or None
    else:
        # Choice groups deliberately have no id_for_label; the group id is the base for option ids.
        input_id = bound_field.auto_id or None
    return FieldDescriptor(
        name=bound_field.html_name,
        kind=kind,
        errors=list(bound_field.errors),
        human_label=str(bound_field.label) if bound_field.label else None,
        value=bound_field.value(),
        id_for_input=input_id,
    )


def radio_options_for(bound_field: BoundField) -> List[RadioOption]:
    """Return the field's choices as radio options, skipping empty values."""

    choices = getattr(bound_field.field, "choices", None)
    if choices is None:
        raise FieldDescriptorError(f"Field {bound_field.html_name!r} has no choices to render as radios")
    options: List[RadioOption] = []
    for value, display in choices:
        if isinstance(display, (list, tuple)):
            # Named group: flatten its nested choices in order.
            options.extend(
                RadioOption(value=str(v), display_text=str(d)) for v, d in display if v not in ("", None)
            )
            continue
        if value in ("", None):
            continue
        options.append(RadioOption(value=str(value), display_text=str(display)))
    return options


def input_options_for(bound_field: BoundField, **overrides: Any) -> Dict[str, Any]:
    """Collect widget attributes for an input, letting ``overrides`` win.

    ``required`` is left to ``BoundField.as_widget``, which knows which widgets
    support it.
    """

    widget = bound_field.field.widget
    options: Dict[str, Any] = {}
    options.update(getattr(widget, "attrs", {}))
    options.pop("id", None)
    if bound_field.errors:
        options["aria_invalid"] = "true"
    options.update({key: value for key, value in overrides.items() if value is not None})
    return options


def renderer_for(bound_field: BoundField, renderer: AccessibleFieldRenderer | None = None) -> AccessibleFieldRenderer:
    """Return ``renderer`` (or a default one) drawing with the field's own widget."""

    renderer = renderer or AccessibleFieldRenderer()
    return renderer.with_base(BoundFieldInputRenderer(bound_field))


def render_bound_field(
    bound_field: BoundField,
    renderer: AccessibleFieldRenderer | None = None,
    **options: Any,
) -> SafeString:
    """Render ``bound_field`` as a labelled input or a fieldset of choices."""

    renderer = renderer_for(bound_field, renderer)
    descriptor = descriptor_for(bound_field)
    if descriptor.kind is FieldKind.RADIO_GROUP:
        return renderer.render_radio_group(descriptor, radio_options_for(bound_field))
    if descriptor.kind is FieldKind.CHECKBOX_GROUP:
        # Django's own markup already pairs every checkbox with a label and checks each selected value.
        return renderer.render_fieldset(descriptor, bound_field.as_widget(attrs=widget_attrs(options)))
    return renderer.render_text_field(descriptor, **input_options_for(bound_field, **options))


def form_error_messages(form: forms.BaseForm) -> List[str]:
    """Errors no visible field will show: form-wide ones, then hidden fields' first errors."""

    messages = [str(message) for message in form.non_field_errors()]
    for bound_field in form.hidden_fields():
        if bound_field.errors:
            messages.append(
                gettext("(Hidden field %(name)s) %(error)s")
                % {"name": bound_field.name, "error": bound_field.errors[0]}
            )
    return messages


def render_form(form: forms.BaseForm, renderer: AccessibleFieldRenderer | None = None) -> SafeString:
    """Render form-level errors, every visible field in order, then hidden inputs."""

    renderer = renderer or AccessibleFieldRenderer()
    parts = [renderer.render_form_errors(form_error_messages(form))]
    parts.extend(render_bound_field(bound_field, renderer) for bound_field in form.visible_fields())
    parts.extend(bound_field.as_widget() for bound_field in form.hidden_fields())
    return mark_safe("".join(parts))
