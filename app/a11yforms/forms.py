from __future__ import annotations

from typing import Any

from django import forms
from django.utils.safestring import SafeString
from django.utils.translation import gettext_lazy as _

from .boundfields import render_bound_field, render_form
from .renderers import AccessibleFieldRenderer


class AccessibleFormMixin:
    """Render form fields through ``AccessibleFieldRenderer``."""

    accessible_renderer_class = AccessibleFieldRenderer

    def get_accessible_renderer(self) -> AccessibleFieldRenderer:
        renderer = getattr(self, "_accessible_renderer", None)
        if renderer is None:
            renderer = self.accessible_renderer_class()
            self._accessible_renderer = renderer
        return renderer

    def accessible_field(self, name: str, **options: Any) -> SafeString:
        """Render the field called ``name`` with labels, legend and inline error."""

        return render_bound_field(self[name], self.get_accessible_renderer(), **options)

    def as_accessible(self) -> SafeString:
        """Render form errors, every visible field in declaration order, then the hidden ones."""

        return render_form(self, self.get_accessible_renderer())


class AccessibleForm(AccessibleFormMixin, forms.Form):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.label_suffix = ""


class AddressForm(AccessibleForm):
    ADDRESS_TYPES = [
        ("billing", _("Billing Address")),
        ("mailing", _("Mailing Address")),
    ]

    street = forms.CharField(max_length=255)
    city = forms.CharField(max_length=120)
    zip = forms.CharField(max_length=10)
    type = forms.ChoiceField(choices=ADDRESS_TYPES, widget=forms.RadioSelect)

    def clean_zip(self):
        value = self.cleaned_data["zip"].strip()
        digits = value.replace("-", "")
        if not digits.isdigit() or len(digits) not in (5, 9):
            raise forms.ValidationError(_("must be a 5 or 9 digit ZIP code"))
        return value
