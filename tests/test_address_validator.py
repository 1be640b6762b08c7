"""Unit tests for chain address format checks."""

from __future__ import annotations

import pytest

from swap_split.core.exceptions import InvalidFormatError
from swap_split.core.services.address_validator import is_valid_address, validate_address
from tests.helpers import TOKEN_A


def test_valid_address_is_returned_lowercased() -> None:
    mixed = "0x" + TOKEN_A[2:].upper()

    assert validate_address(mixed, field="to_token") == TOKEN_A
    assert is_valid_address(mixed)


@pytest.mark.parametrize(
    "value",
    [
        "invalid_wallet_address",
        "",
        TOKEN_A[2:],                # no prefix
        "1x" + TOKEN_A[2:],         # wrong prefix
        TOKEN_A[:-1],               # 63 hex digits
        TOKEN_A + "0",              # 65 hex digits
        TOKEN_A[:-1] + "g",         # non-hex
        " " + TOKEN_A,
        None,
        12345,
    ],
)
def test_malformed_addresses_are_rejected(value: object) -> None:
    assert not is_valid_address(value)

    with pytest.raises(InvalidFormatError) as exc_info:
        validate_address(value, field="wallet_address")

    assert exc_info.value.reason == "InvalidFormat"
    assert exc_info.value.field == "wallet_address"
    assert exc_info.value.index is None


def test_error_carries_index_for_list_fields() -> None:
    with pytest.raises(InvalidFormatError) as exc_info:
        validate_address("0x1234", field="from_token", index=3)

    assert exc_info.value.field == "from_token"
    assert exc_info.value.index == 3
    assert "from_token[3]" in str(exc_info.value)
