"""Template tag rendering of accessible form fields."""
from __future__ import annotations

import pytest
from django import forms
from django.template import Context, Template
from django.utils.safestring import SafeString

from a11yforms.exceptions import FieldDescriptorError
from a11yforms.forms import AddressForm
from a11yforms.templatetags.accessible_forms import (
    accessible_field,
    accessible_form,
    accessible_radio_group,
    accessible_text_field,
)


def _render(source: str, **context) -> str:
    return Template("{% load accessible_forms %}" + source).render(Context(context))


def test_text_field_tag_wraps_input_in_label():
    html = _render("{% accessible_text_field form.street placeholder='123 Main St' css_class='wide' %}", form=AddressForm())

    assert html.startswith('<label for="id_street"><span class="label-text">Street</span><input ')
    assert 'placeholder="123 Main St"' in html
    assert 'class="wide"' in html
    assert html.endswith("</label>")
    assert "error-text" not in html


def test_text_field_tag_shows_first_error_and_marks_input_invalid():
    form = AddressForm(data={"street": "1 Main St", "city": "Springfield", "zip": "12", "type": "billing"})
    assert not form.is_valid()

    html = _render("{% accessible_text_field form.zip %}", form=form)

    assert 'value="12"' in html
    assert 'aria-invalid="true"' in html
    assert html.endswith('<span class="error-text">must be a 5 or 9 digit ZIP code</span></label>')


def test_keyword_attributes_use_dashes():
    html = _render("{% accessible_text_field form.zip autocomplete='postal-code' aria_describedby='zip-help' %}", form=AddressForm())

    assert 'autocomplete="postal-code"' in html
    assert 'aria-describedby="zip-help"' in html


def test_radio_group_tag_renders_fieldset_and_legend():
    html = _render("{% accessible_radio_group form.type %}", form=AddressForm(initial={"type": "billing"}))

    assert html.startswith("<fieldset><legend>Type</legend>")
    assert html.endswith("</fieldset>")
    assert html.count('type="radio"') == 2
    assert '<label for="id_type_billing">Billing Address</label>' in html
    assert '<label for="id_type_mailing">Mailing Address</label>' in html
    assert html.index("Billing Address") < html.index("Mailing Address")


def test_radio_group_tag_accepts_select_backed_choice_fields():
    class PlanForm(forms.Form):
        plan = forms.ChoiceField(choices=[("basic", "Basic"), ("pro", "Pro")])

    html = _render("{% accessible_radio_group form.plan %}", form=PlanForm())

    assert "<legend>Plan</legend>" in html
    assert 'id="id_plan_pro"' in html


def test_radio_group_tag_rejects_fields_without_choices():
    with pytest.raises(FieldDescriptorError):
        _render("{% accessible_radio_group form.street %}", form=AddressForm())


def test_field_tag_dispatches_on_widget():
    form = AddressForm()

    assert _render("{% accessible_field form.city %}", form=form).startswith('<label for="id_city">')
    assert _render("{% accessible_field form.type %}", form=form).startswith("<fieldset>")


def test_form_tag_renders_every_field():
    html = _render("{% accessible_form form %}", form=AddressForm())

    for field_id in ("id_street", "id_city", "id_zip"):
        assert f'<label for="{field_id}">' in html
    assert html.count("<fieldset>") == 1


def test_form_tag_supports_plain_django_forms():
    class NewsletterForm(forms.Form):
        email = forms.EmailField()
        source = forms.CharField(widget=forms.HiddenInput, initial="footer")

    html = _render("{% accessible_form form %}", form=NewsletterForm())

    assert html.startswith('<label for="id_email"><span class="label-text">Email</span>')
    assert 'type="hidden"' in html
    assert html.count("<label") == 1


def test_form_tag_renders_form_errors_for_plain_django_forms():
    class TransferForm(forms.Form):
        amount = forms.IntegerField()
        account = forms.CharField(widget=forms.HiddenInput)

        def clean(self):
            raise forms.ValidationError("transfers are paused")

    form = TransferForm(data={"amount": "5"})
    form.is_valid()

    html = _render("{% accessible_form form %}", form=form)

    assert html.startswith(
        '<span class="error-text">transfers are paused</span>'
        '<span class="error-text">(Hidden field account) This field is required.</span>'
        '<label for="id_amount">'
    )


def test_text_field_tag_keeps_a_textarea_widget():
    class CommentForm(forms.Form):
        body = forms.CharField(widget=forms.Textarea)

    html = _render("{% accessible_text_field form.body placeholder='Say something' %}", form=CommentForm())

    assert html.startswith('<label for="id_body"><span class="label-text">Body</span><textarea ')
    assert 'placeholder="Say something"' in html
    assert "<input" not in html


def test_field_tag_renders_checkbox_groups_in_a_fieldset():
    class InterestsForm(forms.Form):
        topics = forms.MultipleChoiceField(choices=[("a", "Art"), ("b", "Books")], widget=forms.CheckboxSelectMultiple)

    html = _render("{% accessible_field form.topics %}", form=InterestsForm(initial={"topics": ["b"]}))

    assert html.startswith("<fieldset><legend>Topics</legend>")
    assert html.count('type="checkbox"') == 2
    assert 'type="radio"' not in html


def test_tags_return_safe_strings():
    form = AddressForm()

    assert isinstance(accessible_text_field(form["street"]), SafeString)
    assert isinstance(accessible_radio_group(form["type"]), SafeString)
    assert isinstance(accessible_field(form["zip"]), SafeString)
    assert isinstance(accessible_form(form), SafeString)
    assert isinstance(accessible_form(forms.Form()), SafeString)
