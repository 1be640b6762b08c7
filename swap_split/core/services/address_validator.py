"""
Address Validator
اعتبارسنجی فرمت آدرس کیف پول و توکن (فقط syntax، بدون RPC)
"""

import re
from typing import Optional

from swap_split.core.exceptions import InvalidFormatError

ADDRESS_PREFIX = "0x"
ADDRESS_BYTES = 32

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{%d}$" % (ADDRESS_BYTES * 2))


def is_valid_address(value) -> bool:
    return isinstance(value, str) and _ADDRESS_RE.fullmatch(value) is not None


def validate_address(value, field: str = "address", index: Optional[int] = None) -> str:
    """
    Check that `value` is a 0x-prefixed, 32-byte hex address.
    Returns the lowercased address; raises InvalidFormatError naming `field`.
    """
    if not is_valid_address(value):
        where = field if index is None else f"{field}[{index}]"
        raise InvalidFormatError(
            f"{where} must be {ADDRESS_PREFIX} followed by {ADDRESS_BYTES * 2} hex characters",
            field=field,
            index=index,
        )
    return value.lower()
