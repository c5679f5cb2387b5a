import io

import pytest

from rustdrills.errors import (
    CreationError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    pop_too_much,
    purchase,
    read_and_validate,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError, match="`name` was empty; it must be nonempty."):
        generate_nametag_text("")


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize("text", [" 34", "3_4", "34 ", "-", "1.5"])
def test_total_cost_is_strict(text):
    with pytest.raises(ValueError, match="invalid digit found in string"):
        total_cost(text)


def test_total_cost_empty_string():
    with pytest.raises(ValueError, match="empty string"):
        total_cost("")


def test_total_cost_out_of_range():
    with pytest.raises(ValueError, match="too large"):
        total_cost(str(2**31))


def test_purchase_affordable(capsys):
    remaining = purchase(100, "8")
    assert remaining == 59
    assert capsys.readouterr().out == "You now have 59 tokens.\n"


def test_purchase_unaffordable(capsys):
    assert purchase(10, "8") == 10
    assert capsys.readouterr().out == "You can't afford that many!\n"


def test_read_and_validate_success():
    assert read_and_validate(io.StringIO("42\n")) == PositiveNonzeroInteger(42)


def test_read_and_validate_not_num():
    with pytest.raises(ValueError):
        read_and_validate(io.StringIO("eleven billion\n"))


def test_read_and_validate_non_positive():
    with pytest.raises(CreationError) as info:
        read_and_validate(io.StringIO("-40\n"))
    assert info.value == CreationError(CreationError.NEGATIVE)


def test_read_and_validate_ioerror():
    class Broken:
        def readline(self):
            raise BrokenPipeError("uh-oh!")

    with pytest.raises(OSError) as info:
        read_and_validate(Broken())
    assert str(info.value) == "uh-oh!"


def test_positive_nonzero_integer_creation():
    assert PositiveNonzeroInteger.new(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger.new(-10)
    assert negative.value == CreationError(CreationError.NEGATIVE)
    assert str(negative.value) == "Negative"
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger.new(0)
    assert zero.value == CreationError(CreationError.ZERO)
    assert str(zero.value) == "Zero"


def test_constructor_validates_too():
    with pytest.raises(CreationError):
        PositiveNonzeroInteger(0)


def test_pop_too_much(capsys):
    assert pop_too_much() is True
    assert "The last item in the list is 3" in capsys.readouterr().out