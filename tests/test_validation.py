import pytest

from sirene_ui import validation
from sirene_ui.errors import ValidationError


def test_require_text_returns_trimmed_value():
    assert validation.require_text("  75056 ", "missing") == "75056"


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_require_text_rejects_empty_values(value):
    with pytest.raises(ValidationError) as exc:
        validation.require_text(value, "missing")
    assert str(exc.value) == "missing"


def test_variant_messages():
    with pytest.raises(ValidationError, match="a search term is required"):
        validation.search_term(" ")
    with pytest.raises(ValidationError, match="a postal code is required"):
        validation.commune_code("")
    with pytest.raises(ValidationError, match="an address is required"):
        validation.address(None)


def test_commune_code_is_not_checked_for_digits():
    assert validation.commune_code("2A004") == "2A004"
