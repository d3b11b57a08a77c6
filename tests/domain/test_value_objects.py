"""Unit tests for the simple constrained value objects."""

from dataclasses import FrozenInstanceError

import pytest

from ordertaking.domain.model.errors import ErrorKind
from ordertaking.domain.model.value_objects import (
    EmailAddress,
    OrderId,
    OrderLineId,
    PdfAttachment,
    PromotionCode,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
)


# ── String50 ─────────────────────────────────────────────────────────────────


class TestString50:

    @pytest.mark.parametrize("raw", ["a", "Alice", "x" * 50])
    def test_valid_lengths(self, raw):
        s = String50.create("Name", raw).unwrap()
        assert s.value == raw
        assert str(s) == raw

    def test_empty_rejected(self):
        result = String50.create("Name", "")
        assert result.error.kind == ErrorKind.EMPTY_INPUT

    def test_51_chars_rejected(self):
        result = String50.create("Name", "x" * 51)
        assert result.error.kind == ErrorKind.TOO_LONG
        assert "50 chars" in str(result.error)

    def test_option_empty_is_none(self):
        assert String50.create_option("Line2", "").unwrap() is None

    def test_option_present(self):
        assert String50.create_option("Line2", "Suite 5").unwrap() == String50.create(
            "Line2", "Suite 5"
        ).unwrap()

    def test_option_too_long_rejected(self):
        result = String50.create_option("Line2", "x" * 51)
        assert result.error.kind == ErrorKind.TOO_LONG

    def test_equal_by_value(self):
        assert String50.create("A", "same").unwrap() == String50.create("B", "same").unwrap()


class TestOpaqueConstruction:

    def test_direct_construction_refused(self):
        with pytest.raises(TypeError, match="String50.create"):
            String50("anything")

    def test_forged_seal_refused(self):
        with pytest.raises(TypeError):
            ZipCode("12345", seal=object())

    def test_values_are_immutable(self):
        s = String50.create("Name", "Alice").unwrap()
        with pytest.raises(FrozenInstanceError):
            s.value = "Mallory"


# ── EmailAddress ─────────────────────────────────────────────────────────────


class TestEmailAddress:

    @pytest.mark.parametrize("raw", ["a@b", "alice@example.com", "x@y@z"])
    def test_valid(self, raw):
        assert EmailAddress.create("Email", raw).unwrap().value == raw

    @pytest.mark.parametrize("raw", ["alice", "@example.com", "alice@"])
    def test_missing_parts_rejected(self, raw):
        result = EmailAddress.create("Email", raw)
        assert result.error.kind == ErrorKind.PATTERN_MISMATCH

    def test_empty_rejected(self):
        assert EmailAddress.create("Email", "").error.kind == ErrorKind.EMPTY_INPUT


# ── ZipCode ──────────────────────────────────────────────────────────────────


class TestZipCode:

    def test_five_digits(self):
        assert ZipCode.create("Zip", "90210").unwrap().value == "90210"

    @pytest.mark.parametrize("raw", ["1234", "123456", "12345-6789", "1234a", " 12345"])
    def test_anything_else_rejected(self, raw):
        assert ZipCode.create("Zip", raw).error.kind == ErrorKind.PATTERN_MISMATCH

    def test_empty_rejected(self):
        assert ZipCode.create("Zip", "").error.kind == ErrorKind.EMPTY_INPUT


# ── UsStateCode ──────────────────────────────────────────────────────────────


class TestUsStateCode:

    @pytest.mark.parametrize("raw", ["AK", "CA", "NY", "TX", "WY"])
    def test_known_states(self, raw):
        assert UsStateCode.create("State", raw).unwrap().value == raw

    @pytest.mark.parametrize("raw", ["XX", "ca", "CAL", "C", "DC", "ZZ"])
    def test_unknown_codes_rejected(self, raw):
        assert UsStateCode.create("State", raw).error.kind == ErrorKind.PATTERN_MISMATCH


# ── Ids and codes ────────────────────────────────────────────────────────────


class TestIds:

    @pytest.mark.parametrize("factory", [OrderId.create, OrderLineId.create, PromotionCode.create])
    def test_one_to_fifty_chars(self, factory):
        assert factory("Id", "ORD-1").unwrap().value == "ORD-1"
        assert factory("Id", "x" * 50).ok
        assert factory("Id", "").error.kind == ErrorKind.EMPTY_INPUT
        assert factory("Id", "x" * 51).error.kind == ErrorKind.TOO_LONG

    def test_different_id_types_never_equal(self):
        assert OrderId.create("Id", "1").unwrap() != OrderLineId.create("Id", "1").unwrap()


# ── VipStatus ────────────────────────────────────────────────────────────────


class TestVipStatus:

    @pytest.mark.parametrize("raw", ["VIP", "vip", "Vip"])
    def test_vip_case_insensitive(self, raw):
        assert VipStatus.create("VipStatus", raw).unwrap() is VipStatus.VIP

    @pytest.mark.parametrize("raw", ["Normal", "normal", "NORMAL"])
    def test_normal_case_insensitive(self, raw):
        assert VipStatus.create("VipStatus", raw).unwrap() is VipStatus.NORMAL

    def test_unknown_rejected(self):
        result = VipStatus.create("VipStatus", "member")
        assert result.error.kind == ErrorKind.UNRECOGNIZED_VALUE
        assert str(result.error) == "VipStatus: Must be one of 'Normal', 'VIP'"

    def test_display_strings(self):
        assert VipStatus.NORMAL.value == "Normal"
        assert str(VipStatus.VIP) == "VIP"


# ── PdfAttachment ────────────────────────────────────────────────────────────


class TestPdfAttachment:

    def test_repr_hides_content(self):
        pdf = PdfAttachment("ack.pdf", b"%PDF-1.4 ...")
        assert repr(pdf) == "PdfAttachment(name='ack.pdf', size=12)"
