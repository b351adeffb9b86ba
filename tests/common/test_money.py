from decimal import Decimal

import pytest

from hrms_payroll.common.money import round_half_up, to_decimal
from hrms_payroll.core.exceptions import ValidationError


def test_round_half_up_goes_away_from_zero_on_half():
    assert round_half_up(Decimal("112.5")) == Decimal("113")
    assert round_half_up(Decimal("487.5")) == Decimal("488")
    assert round_half_up(Decimal("2.675"), 2) == Decimal("2.68")


def test_to_decimal():
    assert to_decimal(None) == 0
    assert to_decimal("") == 0
    assert to_decimal(0.1) == Decimal("0.1")

    with pytest.raises(ValidationError):
        to_decimal(True)


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-inf", float("nan"), Decimal("Infinity")])
def test_to_decimal_rejects_non_finite(value):
    with pytest.raises(ValidationError, match="finite"):
        to_decimal(value)
