"""Addresses and payload builders shared by the test modules."""

from __future__ import annotations

from typing import Any

WALLET = "0x40ca979f20ed76f960dc719457eaf0cef3b2c3932d58435b9192a58bc56c1e40"
OTHER_WALLET = "0x1111111111111111111111111111111111111111111111111111111111111111"
TOKEN_A = "0xdbfcab49bd9bced4636b04319d71fbd0d84bde78a1d38e9e2fc391e83187c1c3"
TOKEN_B = "0xde3bc70e81af42a996a559a60f0fdf1cb371f012790f1b30de709efa637b9af5"
TOKEN_C = "0x07ab8059db97aab8ced83b37a1d60b8eef540f6cdc96acc153d583a59bedd125"


def subscription_payload(**overrides: Any) -> dict[str, Any]:
    """Accepted request: wallet W, to_token A, [B, C] at [60, 40]."""
    payload: dict[str, Any] = {
        "wallet_address": WALLET,
        "to_token": TOKEN_A,
        "from_token": [TOKEN_B, TOKEN_C],
        "percentage": [60, 40],
    }
    payload.update(overrides)
    return payload
