"""Tests for exact Decimal assembly."""

from decimal import Decimal, localcontext

import pytest

from moneyparse import InvalidAmountError
from moneyparse.diagnostics import DiagnosticCode
from moneyparse.parsing.amount import apply_multiplier, assemble_amount, to_decimal


class TestToDecimal:
    """to_decimal() joins major and minor digits."""

    def test_joins_with_period(self) -> None:
        assert to_decimal("1234", "56") == Decimal("1234.56")

    def test_trailing_zeros_preserved(self) -> None:
        assert str(to_decimal("12", "50")) == "12.50"

    def test_empty_major(self) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            to_decimal("", "50", value=".50")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.AMOUNT_NO_DIGITS

    def test_non_digit_minor(self) -> None:
        with pytest.raises(InvalidAmountError) as exc_info:
            to_decimal("1000", "0x", value="1000.0x")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.AMOUNT_NOT_DECIMAL
        assert isinstance(exc_info.value.__cause__, ArithmeticError)


class TestApplyMultiplier:
    """apply_multiplier() shifts the exponent without rounding."""

    def test_no_exponent_is_identity(self) -> None:
        amount = Decimal("1.50")
        assert apply_multiplier(amount, 0) is amount

    def test_integral_result_written_out(self) -> None:
        result = apply_multiplier(Decimal("1.5"), 6)
        assert result == Decimal("1500000")
        assert str(result) == "1500000"

    def test_fractional_result_kept(self) -> None:
        assert str(apply_multiplier(Decimal("1.2345"), 3)) == "1234.5"

    def test_exact_beyond_context_precision(self) -> None:
        amount = Decimal("123456789012345678901234567890.123")
        with localcontext() as ctx:
            ctx.prec = 10
            result = apply_multiplier(amount, 12)
        assert str(result) == "123456789012345678901234567890123000000000"

    def test_sign_preserved(self) -> None:
        assert apply_multiplier(Decimal("-2.5"), 3) == Decimal("-2500")


class TestAssembleAmount:
    """assemble_amount() combines digits, magnitude and sign."""

    def test_plain(self) -> None:
        assert assemble_amount("20", "0") == Decimal("20")

    def test_negative(self) -> None:
        assert assemble_amount("20", "0", negative=True) == Decimal("-20")

    def test_negative_zero_keeps_sign(self) -> None:
        assert assemble_amount("0", "0", negative=True).is_signed()

    def test_multiplier_and_sign(self) -> None:
        assert assemble_amount("1", "5", exponent=6, negative=True) == Decimal("-1500000")
