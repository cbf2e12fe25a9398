"""Unit tests for value checks."""

import pytest
from pathproviso.checks import between, eq, ge, gt, le, lt, perm_eq, perm_has_all, perm_has_none


class TestComparisons:
    """Tests for gt, ge, lt, le, eq."""

    def test_gt(self) -> None:
        """gt passes above the limit and fails at it."""
        gt(0)(1)
        with pytest.raises(ValueError, match=r"the value \(0\) must be greater than 0"):
            gt(0)(0)

    def test_ge(self) -> None:
        """ge passes at the limit."""
        ge(5)(5)
        with pytest.raises(ValueError, match="greater than or equal to 5"):
            ge(5)(4)

    def test_lt(self) -> None:
        """lt fails at the limit."""
        lt(10)(9)
        with pytest.raises(ValueError, match="less than 10"):
            lt(10)(10)

    def test_le(self) -> None:
        """le passes at the limit."""
        le(10)(10)
        with pytest.raises(ValueError, match="less than or equal to 10"):
            le(10)(11)

    def test_eq(self) -> None:
        """eq only passes on equality."""
        eq("x")("x")
        with pytest.raises(ValueError, match="must equal y"):
            eq("y")("x")


class TestBetween:
    """Tests for between."""

    def test_inclusive_bounds(self) -> None:
        """Both bounds are inclusive."""
        check = between(1, 3)
        check(1)
        check(3)

    def test_outside(self) -> None:
        """Values outside the range fail."""
        with pytest.raises(ValueError, match="between 1 and 3"):
            between(1, 3)(4)

    def test_inverted_range_rejected(self) -> None:
        """An upper limit below the lower limit is rejected up front."""
        with pytest.raises(ValueError, match="impossible range"):
            between(3, 1)


class TestPermissionChecks:
    """Tests for permission bit checks."""

    def test_perm_eq_message_names_both_values(self) -> None:
        """perm_eq reports actual and expected bits in octal."""
        perm_eq(0o600)(0o600)
        with pytest.raises(ValueError) as exc_info:
            perm_eq(0o600)(0o644)

        message = str(exc_info.value)
        assert "0o644" in message
        assert "0o600" in message

    def test_perm_eq_pads_small_values(self) -> None:
        """Small modes are rendered with three octal digits."""
        with pytest.raises(ValueError, match="0o044"):
            perm_eq(0o600)(0o044)

    def test_perm_has_all(self) -> None:
        """perm_has_all requires every bit and names the missing ones."""
        perm_has_all(0o600)(0o644)
        with pytest.raises(ValueError, match=r"missing 0o200"):
            perm_has_all(0o600)(0o444)

    def test_perm_has_none(self) -> None:
        """perm_has_none forbids any of the bits and names those found."""
        perm_has_none(0o077)(0o600)
        with pytest.raises(ValueError, match=r"found 0o044"):
            perm_has_none(0o077)(0o644)
