import pytest

from a11yforms.descriptors import FieldDescriptor, FieldKind, RadioOption, humanize
from a11yforms.exceptions import FieldDescriptorError


@pytest.mark.parametrize(
    "name, expected",
    [
        ("street", "Street"),
        ("zip", "Zip"),
        ("street_address", "Street Address"),
        ("billing-contact", "Billing Contact"),
        ("country_id", "Country"),
        ("  first__name ", "First Name"),
        ("URL", "Url"),
    ],
)
def test_humanize(name, expected):
    assert humanize(name) == expected


def test_descriptor_derives_human_label_from_name():
    descriptor = FieldDescriptor(name="street_address")
    assert descriptor.human_label == "Street Address"
    assert descriptor.kind is FieldKind.TEXT


def test_descriptor_keeps_explicit_human_label():
    descriptor = FieldDescriptor(name="zip", human_label="ZIP code")
    assert descriptor.human_label == "ZIP code"


def test_descriptor_normalises_errors_to_tuple_of_strings():
    descriptor = FieldDescriptor(name="zip", errors=["can't be blank", "is too short"])
    assert descriptor.errors == ("can't be blank", "is too short")
    assert descriptor.first_error == "can't be blank"

    single = FieldDescriptor(name="zip", errors="is invalid")
    assert single.errors == ("is invalid",)

    empty = FieldDescriptor(name="zip", errors=None)
    assert empty.errors == ()
    assert empty.first_error is None


def test_descriptor_accepts_kind_values():
    descriptor = FieldDescriptor(name="type", kind="radio_group")
    assert descriptor.kind is FieldKind.RADIO_GROUP


def test_descriptor_is_immutable():
    descriptor = FieldDescriptor(name="street")
    with pytest.raises(AttributeError):
        descriptor.name = "city"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_descriptor_requires_name(name):
    with pytest.raises(FieldDescriptorError):
        FieldDescriptor(name=name)


def test_descriptor_rejects_unknown_kind():
    with pytest.raises(FieldDescriptorError):
        FieldDescriptor(name="street", kind="checkbox")


def test_radio_option_coerce_accepts_pairs_and_instances():
    option = RadioOption("billing", "Billing Address")
    assert RadioOption.coerce(option) is option
    assert RadioOption.coerce(("mailing", "Mailing Address")) == RadioOption("mailing", "Mailing Address")
    assert RadioOption.coerce([1, "One"]) == RadioOption("1", "One")


@pytest.mark.parametrize("bad", ["billing", ("a", "b", "c"), None])
def test_radio_option_coerce_rejects_other_shapes(bad):
    with pytest.raises(FieldDescriptorError):
        RadioOption.coerce(bad)
