"""Template tags that render form fields with accessible markup."""
from __future__ import annotations

from dataclasses import replace
from typing import Any

from django import template
from django.utils.safestring import SafeString

from a11yforms.boundfields import (
    descriptor_for,
    input_options_for,
    radio_options_for,
    render_bound_field,
    render_form,
    renderer_for,
)
from a11yforms.descriptors import FieldKind
from a11yforms.renderers import AccessibleFieldRenderer

register = template.Library()


def _renderer(form: Any) -> AccessibleFieldRenderer:
    get_renderer = getattr(form, "get_accessible_renderer", None)
    if get_renderer is not None:
        return get_renderer()
    return AccessibleFieldRenderer()


@register.simple_tag
def accessible_text_field(
    bound_field, css_class: str | None = None, placeholder: str | None = None, **attrs: Any
) -> SafeString:
    """Render ``bound_field`` inside its label with the first error inline."""

    descriptor = descriptor_for(bound_field)
    renderer = _renderer(bound_field.form)
    if descriptor.kind is FieldKind.TEXT:
        renderer = renderer_for(bound_field, renderer)
    else:
        # A choice widget cannot sit inside one label; draw a plain text input instead.
        descriptor = replace(descriptor, kind=FieldKind.TEXT)
    options = input_options_for(bound_field, css_class=css_class, placeholder=placeholder, **attrs)
    return renderer.render_text_field(descriptor, **options)


@register.simple_tag
def accessible_radio_group(bound_field) -> SafeString:
    """Render ``bound_field`` choices as radios in a fieldset with a legend."""

    descriptor = descriptor_for(bound_field)
    if descriptor.kind is not FieldKind.RADIO_GROUP:
        descriptor = replace(descriptor, kind=FieldKind.RADIO_GROUP, id_for_input=bound_field.auto_id or None)
    return _renderer(bound_field.form).render_radio_group(descriptor, radio_options_for(bound_field))


@register.simple_tag
def accessible_field(bound_field, **options: Any) -> SafeString:
    """Render ``bound_field`` as a text field or a group of choices based on its widget."""

    return render_bound_field(bound_field, _renderer(bound_field.form), **options)


@register.simple_tag
def accessible_form(form) -> SafeString:
    if hasattr(form, "as_accessible"):
        return form.as_accessible()
    return render_form(form)
