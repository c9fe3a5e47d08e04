"""Tests for the per-kind format engines."""

from datetime import date
from decimal import Decimal

import pytest

from pydantic_format.core.errors import FormatTypeMismatchError
from pydantic_format.core.errors import InvalidAlignmentError
from pydantic_format.core.errors import InvalidSpecError
from pydantic_format.core.errors import UnsupportedFormatTypeError
from pydantic_format.formatting import apply_format
from pydantic_format.formatting.engines import CustomEngine
from pydantic_format.formatting.engines import FloatEngine
from pydantic_format.formatting.engines import IntegerEngine
from pydantic_format.formatting.engines import TextEngine
from pydantic_format.formatting.engines import get_engine
from pydantic_format.formatting.engines import get_value_kind
from pydantic_format.formatting.enums import ValueKind
from pydantic_format.formatting.types import ConvertedText


class Money:
    """Formattable test value with its own spec language."""

    def __init__(self, cents: int) -> None:
        self.cents = cents

    def to_display_string(self) -> str:
        return f"${self.cents / 100:.2f}"

    def to_debug_string(self) -> str:
        return f"Money({self.cents})"

    def apply_format_spec(self, format_spec: str) -> str:
        if format_spec == "cents":
            return f"{self.cents}c"
        return self.to_display_string()


class Plain:
    """Object without formatting of its own."""

    def __str__(self) -> str:
        return "plain"


class TestValueKind:
    """Test engine dispatch."""

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ("text", ValueKind.TEXT),
            (ConvertedText("text"), ValueKind.TEXT),
            (42, ValueKind.INTEGER),
            (True, ValueKind.INTEGER),
            (4.2, ValueKind.FLOAT),
            (Decimal("1.5"), ValueKind.CUSTOM),
            (date(2024, 1, 2), ValueKind.CUSTOM),
            (Money(100), ValueKind.CUSTOM),
            (Plain(), ValueKind.CUSTOM),
            (None, ValueKind.CUSTOM),
        ],
    )
    def test_get_value_kind(self, value: object, kind: ValueKind) -> None:
        """Test values map to the expected kind."""
        assert get_value_kind(value) is kind

    def test_get_engine(self) -> None:
        """Test the registry returns the matching engine."""
        assert isinstance(get_engine(ValueKind.TEXT), TextEngine)
        assert isinstance(get_engine(ValueKind.INTEGER), IntegerEngine)
        assert isinstance(get_engine(ValueKind.FLOAT), FloatEngine)
        assert isinstance(get_engine(ValueKind.CUSTOM), CustomEngine)

    def test_get_engine_unknown(self) -> None:
        """Test an unknown kind is rejected."""
        with pytest.raises(ValueError, match="Unsupported value kind"):
            get_engine("bogus")  # type: ignore[arg-type]


class TestTextEngine:
    """Test TextEngine."""

    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            ("", "hi"),
            ("s", "hi"),
            ("5", "hi   "),
            (">5", "   hi"),
            ("^10", "    hi    "),
            ("^5", " hi  "),
            ("*<4", "hi**"),
            ("05", "hi000"),
            (".1", "h"),
            ("5.1", "h    "),
        ],
    )
    def test_render(self, spec: str, expected: str) -> None:
        """Test padding and truncation."""
        assert TextEngine().render("hi", spec) == expected

    def test_numeric_type_rejected(self) -> None:
        """Test 'd' on a string."""
        with pytest.raises(UnsupportedFormatTypeError, match="Unknown format code"):
            TextEngine().render("hi", "d")

    def test_numeric_type_after_conversion(self) -> None:
        """Test a numeric type on converted text names the conversion."""
        with pytest.raises(FormatTypeMismatchError, match="conversion"):
            TextEngine().render(ConvertedText("3.5"), ".2f")

    def test_sign_rejected(self) -> None:
        """Test sign option on a string."""
        with pytest.raises(InvalidSpecError, match="Sign not allowed"):
            TextEngine().render("hi", "+")

    def test_alternate_rejected(self) -> None:
        """Test '#' on a string."""
        with pytest.raises(InvalidSpecError, match="Alternate form"):
            TextEngine().render("hi", "#")

    def test_grouping_rejected(self) -> None:
        """Test ',' on a string."""
        with pytest.raises(InvalidSpecError):
            TextEngine().render("hi", ",")

    def test_after_sign_alignment_rejected(self) -> None:
        """Test '=' alignment on a string."""
        with pytest.raises(InvalidAlignmentError):
            TextEngine().render("hi", "=5")


class TestIntegerEngine:
    """Test IntegerEngine."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (42, "", "42"),
            (42, "05d", "00042"),
            (-42, "05d", "-0042"),
            (42, "+d", "+42"),
            (42, " d", " 42"),
            (-42, " d", "-42"),
            (255, "#x", "0xff"),
            (255, "#X", "0XFF"),
            (255, "x", "ff"),
            (5, "b", "101"),
            (5, "#b", "0b101"),
            (8, "#o", "0o10"),
            (-255, "#010x", "-0x00000ff"),
            (1234567, ",", "1,234,567"),
            (1234567, "_d", "1_234_567"),
            (0xFFFFFFFF, "_x", "ffff_ffff"),
            (1234, "010,", "00,001,234"),
            (42, "<5", "42   "),
            (42, "^6", "  42  "),
            (-42, "=6", "-   42"),
            (-42, "*=6", "-***42"),
            (42, "x<05", "42xxx"),
            (65, "c", "A"),
            (65, ">3c", "  A"),
            (3, "%", "300.000000%"),
            (3, ".1f", "3.0"),
            (12345, "e", "1.234500e+04"),
            (True, "", "True"),
            (True, "d", "1"),
        ],
    )
    def test_render(self, value: int, spec: str, expected: str) -> None:
        """Test integer presentation types and layout."""
        assert IntegerEngine().render(value, spec) == expected

    def test_unknown_type(self) -> None:
        """Test 's' on an int."""
        with pytest.raises(UnsupportedFormatTypeError, match="'int'"):
            IntegerEngine().render(42, "s")

    def test_unknown_type_names_bool(self) -> None:
        """Test the error names the actual type."""
        with pytest.raises(UnsupportedFormatTypeError, match="'bool'"):
            IntegerEngine().render(True, "s")

    def test_precision_rejected(self) -> None:
        """Test precision on an integer type."""
        with pytest.raises(InvalidSpecError, match="Precision not allowed"):
            IntegerEngine().render(42, ".2d")

    def test_coerce_zero_rejected(self) -> None:
        """Test 'z' on an integer type."""
        with pytest.raises(InvalidSpecError):
            IntegerEngine().render(0, "zd")

    def test_char_out_of_range(self) -> None:
        """Test 'c' beyond the last code point."""
        with pytest.raises(InvalidSpecError, match="range"):
            IntegerEngine().render(0x110000, "c")

    def test_char_with_sign(self) -> None:
        """Test 'c' with a sign option."""
        with pytest.raises(InvalidSpecError, match="Sign not allowed"):
            IntegerEngine().render(65, "+c")


class TestFloatEngine:
    """Test FloatEngine."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (3.14159, "", "3.14159"),
            (3.14159, ".2f", "3.14"),
            (2.5, ".0f", "2"),
            (3.5, ".0f", "4"),
            (2.5, "#.0f", "2."),
            (1.5, "f", "1.500000"),
            (1.5, "F", "1.500000"),
            (0.125, ".2f", "0.12"),
            (-1.5, "+.1f", "-1.5"),
            (1.5, "+.1f", "+1.5"),
            (1.5, "08.2f", "00001.50"),
            (-1.5, "08.2f", "-0001.50"),
            (1234567.891, ",.2f", "1,234,567.89"),
            (1234567.891, "_.1f", "1_234_567.9"),
            (12345.6789, ".3g", "1.23e+04"),
            (12345.6789, ".3G", "1.23E+04"),
            (1.2, "#.3g", "1.20"),
            (0.0001, "g", "0.0001"),
            (0.00001, "g", "1e-05"),
            (100000.0, "g", "100000"),
            (1000000.0, "g", "1e+06"),
            (1.5, "e", "1.500000e+00"),
            (1.5, ".2E", "1.50E+00"),
            (0.0, "e", "0.000000e+00"),
            (1.0, ".3", "1.0"),
            (123.0, ".2", "1.2e+02"),
            (1e16, "", "1e+16"),
            (0.5, "%", "50.000000%"),
            (0.255, ".1%", "25.5%"),
            (-0.0, "", "-0.0"),
            (-0.0, "z.1f", "0.0"),
            (-0.001, "z.1f", "0.0"),
            (-0.001, ".1f", "-0.0"),
            (1.5, "^9.2f", "  1.50   "),
            (1.5, "*<8", "1.5*****"),
        ],
    )
    def test_render(self, value: float, spec: str, expected: str) -> None:
        """Test float presentation types and layout."""
        assert FloatEngine().render(value, spec) == expected

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (float("inf"), "", "inf"),
            (float("-inf"), "+", "-inf"),
            (float("inf"), "+", "+inf"),
            (float("inf"), "F", "INF"),
            (float("nan"), "", "nan"),
            (float("nan"), "+", "+nan"),
            (-float("nan"), "f", "nan"),
            (float("inf"), "06", "000inf"),
            (float("inf"), "%", "inf%"),
        ],
    )
    def test_special_values(self, value: float, spec: str, expected: str) -> None:
        """Test inf and nan rendering."""
        assert FloatEngine().render(value, spec) == expected

    def test_integer_type_rejected(self) -> None:
        """Test 'd' on a float."""
        with pytest.raises(UnsupportedFormatTypeError, match="'float'"):
            FloatEngine().render(1.5, "d")

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (0.0, ".0", "0e+00"),
            (1.0, ".1", "1e+00"),
            (5.0, ".1", "5e+00"),
            (12.0, ".2", "1.2e+01"),
            (-7.0, ".0", "-7e+00"),
            (12.0, ".3", "12.0"),
            (12.5, ".3", "12.5"),
            (0.5, ".0", "0.5"),
            (0.0001, ".2", "0.0001"),
            (529421413.99, "#.9", "5.29421414e+08"),
        ],
    )
    def test_precision_without_type(
        self, value: float, spec: str, expected: str
    ) -> None:
        """Test scientific notation starts one exponent early without a type."""
        assert FloatEngine().render(value, spec) == expected

    def test_huge_fixed(self) -> None:
        """Test every integer digit of a large float is produced exactly."""
        assert FloatEngine().render(1e22, ".0f") == "10000000000000000000000"


class TestCustomEngine:
    """Test CustomEngine."""

    def test_formattable(self) -> None:
        """Test the format spec is handed to the value."""
        assert CustomEngine().render(Money(1234), "cents") == "1234c"
        assert CustomEngine().render(Money(1234), "") == "$12.34"

    def test_own_format_method(self) -> None:
        """Test values with __format__ format themselves."""
        assert CustomEngine().render(date(2024, 1, 2), "%Y/%m/%d") == "2024/01/02"
        assert CustomEngine().render(Decimal("1.005"), ".2f") == "1.00"

    def test_plain_object_empty_spec(self) -> None:
        """Test an object without __format__ uses str()."""
        assert CustomEngine().render(Plain(), "") == "plain"

    def test_plain_object_with_spec(self) -> None:
        """Test an object without __format__ rejects a spec."""
        with pytest.raises(UnsupportedFormatTypeError, match="Plain"):
            CustomEngine().render(Plain(), ">10")


class TestApplyFormat:
    """Test apply_format()."""

    def test_dispatch(self) -> None:
        """Test each kind reaches its engine."""
        assert apply_format("x", ">3") == "  x"
        assert apply_format(7, "03") == "007"
        assert apply_format(0.5, ".1f") == "0.5"
        assert apply_format(None, "") == "None"

    def test_formatted_text_is_stable(self) -> None:
        """Test an empty spec returns formatted text unchanged."""
        once = apply_format(3.14159, ".2f")
        assert apply_format(once, "") == once
