"""Bech32-shaped address validation.

Checks the human-readable prefix, separator, charset, and length of an
address. Checksums are not verified; the chain remains the authority on
whether an address exists.
"""

from __future__ import annotations

from tfctl.domain.errors import InvalidAddress

BECH32_CHARSET = frozenset("qpzry9x8gf2tvdw0s3jn54khce6mua7l")
MAX_ADDRESS_LENGTH = 90
MIN_DATA_LENGTH = 8


class Bech32AddressValidator:
    """Accepts ``<prefix>1<data>`` addresses for a single chain prefix."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix.lower()

    def validate(self, address: str) -> None:
        if not address:
            raise InvalidAddress(address, "address is empty")
        if address != address.lower() and address != address.upper():
            raise InvalidAddress(address, "mixed-case address")
        if len(address) > MAX_ADDRESS_LENGTH:
            raise InvalidAddress(address, f"longer than {MAX_ADDRESS_LENGTH} characters")

        normalized = address.lower()
        hrp, sep, data = normalized.rpartition("1")
        if not sep or not hrp:
            raise InvalidAddress(address, "missing bech32 separator")
        if hrp != self.prefix:
            raise InvalidAddress(address, f"expected prefix {self.prefix!r}, got {hrp!r}")
        if len(data) < MIN_DATA_LENGTH:
            raise InvalidAddress(address, "data part too short")
        bad = sorted(set(data) - BECH32_CHARSET)
        if bad:
            raise InvalidAddress(address, f"invalid characters: {''.join(bad)}")
