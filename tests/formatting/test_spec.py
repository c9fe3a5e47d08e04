"""Tests for the format-spec parser."""

from pydantic import ValidationError
import pytest

from pydantic_format.core.errors import InvalidSpecError
from pydantic_format.formatting.enums import Align
from pydantic_format.formatting.enums import Grouping
from pydantic_format.formatting.enums import Sign
from pydantic_format.formatting.spec import FormatSpec
from pydantic_format.formatting.spec import parse_format_spec


class TestParseFormatSpec:
    """Test parsing of the mini-language."""

    def test_empty_spec(self) -> None:
        """Test empty spec gives all defaults."""
        spec = parse_format_spec("")
        assert spec == FormatSpec()
        assert spec.fill_char == " "
        assert spec.effective_sign is Sign.MINUS

    def test_full_spec(self) -> None:
        """Test every option in one spec."""
        spec = parse_format_spec("*>+z#12,.3f")
        assert spec.fill == "*"
        assert spec.align is Align.RIGHT
        assert spec.sign is Sign.PLUS
        assert spec.coerce_zero
        assert spec.alternate
        assert not spec.zero_pad
        assert spec.width == 12
        assert spec.grouping is Grouping.COMMA
        assert spec.precision == 3
        assert spec.type == "f"

    def test_align_without_fill(self) -> None:
        """Test a lone alignment character."""
        spec = parse_format_spec("^10")
        assert spec.fill is None
        assert spec.align is Align.CENTER
        assert spec.width == 10

    def test_fill_can_be_an_align_character(self) -> None:
        """Test '<' used as a fill character."""
        spec = parse_format_spec("<<5")
        assert spec.fill == "<"
        assert spec.align is Align.LEFT

    def test_zero_flag(self) -> None:
        """Test '0' before the width turns on zero padding."""
        spec = parse_format_spec("05d")
        assert spec.zero_pad
        assert spec.width == 5
        assert spec.fill_char == "0"

    def test_zero_after_explicit_fill_is_width(self) -> None:
        """Test '0' after an explicit fill is part of the width."""
        spec = parse_format_spec("x<05")
        assert not spec.zero_pad
        assert spec.width == 5
        assert spec.fill_char == "x"

    def test_space_sign(self) -> None:
        """Test space sign option."""
        assert parse_format_spec(" d").sign is Sign.SPACE

    def test_underscore_grouping(self) -> None:
        """Test '_' separator and its interval for hex."""
        assert parse_format_spec("_d").group_interval == 3
        assert parse_format_spec("_x").group_interval == 4

    def test_precision_only(self) -> None:
        """Test a bare precision."""
        spec = parse_format_spec(".2")
        assert spec.precision == 2
        assert spec.type is None

    def test_alignment_resolution(self) -> None:
        """Test the zero flag implies '=' for numbers only."""
        spec = parse_format_spec("010")
        assert spec.alignment_for(Align.RIGHT) is Align.AFTER_SIGN
        assert spec.alignment_for(Align.LEFT) is Align.LEFT
        assert parse_format_spec("<010").alignment_for(Align.RIGHT) is Align.LEFT


class TestParseFormatSpecErrors:
    """Test malformed specs."""

    def test_missing_precision(self) -> None:
        """Test '.' without digits."""
        with pytest.raises(InvalidSpecError, match="missing precision"):
            parse_format_spec(".f")

    def test_trailing_garbage(self) -> None:
        """Test more than one type character."""
        with pytest.raises(InvalidSpecError, match="Invalid format specifier"):
            parse_format_spec("10xx")

    def test_both_separators(self) -> None:
        """Test ',' and '_' together."""
        with pytest.raises(InvalidSpecError, match="both"):
            parse_format_spec(",_d")

    def test_repeated_separator(self) -> None:
        """Test ',,' is rejected."""
        with pytest.raises(InvalidSpecError):
            parse_format_spec(",,")

    def test_comma_with_hex(self) -> None:
        """Test ',' is not allowed with a base type."""
        with pytest.raises(InvalidSpecError, match="Cannot specify ',' with 'x'"):
            parse_format_spec(",x")

    def test_separator_with_string_type(self) -> None:
        """Test grouping is not allowed with 's'."""
        with pytest.raises(InvalidSpecError):
            parse_format_spec("_s")

    def test_width_too_large(self) -> None:
        """Test a width that cannot be represented."""
        with pytest.raises(InvalidSpecError, match="Too many decimal digits"):
            parse_format_spec("9" * 30)

    def test_unicode_digits_width(self) -> None:
        """Test non-ASCII decimal digits are accepted as a width."""
        assert parse_format_spec("٣").width == 3

    def test_spec_error_is_value_error(self) -> None:
        """Test spec errors are also ValueErrors."""
        with pytest.raises(ValueError):
            parse_format_spec(".")

    def test_negative_width_rejected_by_model(self) -> None:
        """Test the model refuses a negative width."""
        with pytest.raises(ValidationError):
            FormatSpec(width=-1)
