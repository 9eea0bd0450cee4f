"""Tests for the DMX value codec."""

from __future__ import annotations

import pytest

from gdtfkit.core.errors import InvalidDmxValueError, InvalidValueError
from gdtfkit.core.units import DMX_DEFAULT, DmxValue


class TestDmxValueParse:
    """Tests for DmxValue.parse."""

    def test_parses_coarse_value(self) -> None:
        value = DmxValue.parse("255/1")
        assert value == DmxValue(value=255, byte_count=1, byte_shifting=False)

    def test_parses_fine_value(self) -> None:
        value = DmxValue.parse("32768/2")
        assert value.value == 32768
        assert value.byte_count == 2
        assert not value.byte_shifting

    def test_parses_byte_shifting_marker(self) -> None:
        value = DmxValue.parse("1/2s")
        assert value == DmxValue(value=1, byte_count=2, byte_shifting=True)

    def test_four_byte_value(self) -> None:
        assert DmxValue.parse("4294967295/4").value == 4294967295

    @pytest.mark.parametrize(
        "text",
        ["", "255", "255/", "/1", "1/2/3", "a/1", "1/b", "-1/1", "1.5/1", "1/0", "1/5", "256/1", "1/1x"],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(InvalidDmxValueError) as exc_info:
            DmxValue.parse(text)
        assert exc_info.value.kind == "DMXValue"
        assert exc_info.value.value == text

    def test_error_is_an_invalid_value_error(self) -> None:
        with pytest.raises(InvalidValueError):
            DmxValue.parse("nonsense")


class TestDmxValueSemantics:
    """Equality and rendering."""

    def test_no_normalization_across_byte_counts(self) -> None:
        assert DmxValue.parse("1/1") != DmxValue.parse("256/2")

    def test_shift_flag_participates_in_equality(self) -> None:
        assert DmxValue.parse("1/1") != DmxValue.parse("1/1s")

    def test_default_is_zero_over_one(self) -> None:
        assert DMX_DEFAULT == DmxValue.parse("0/1")

    @pytest.mark.parametrize("text", ["0/1", "32768/2", "1/2s"])
    def test_str_renders_source_text(self, text: str) -> None:
        assert str(DmxValue.parse(text)) == text

    def test_is_immutable(self) -> None:
        value = DmxValue.parse("1/1")
        with pytest.raises(ValueError):
            value.value = 2  # type: ignore[misc]
