"""Decoding of the 4-byte "synch-safe" sizes used in ID3v2 headers.

A synch-safe integer stores a 28-bit value as four 7-bit groups, one per
byte, with the top bit of every byte reserved so that the tag can never
contain a false MPEG sync pattern.

This reader has historically masked each byte with 0xEF rather than 0x7F.
The groups still land at bits 0/7/14/21, but bit 4 of every byte is dropped
instead of the reserved bit 7, so tags whose size bytes have bit 4 set decode
to a smaller size than the writer intended. That behaviour is NOT conformant
with the published ID3v2 specification; it is kept as the default so output
matches earlier releases of this reader. Pass SYNCHSAFE_MASK (or use the
`--strict-size` CLI flag) for the conformant decoding.
"""

LEGACY_MASK = 0xEF
SYNCHSAFE_MASK = 0x7F

MAX_SIZE = (1 << 28) - 1


class SizeCodec:
    """Decode (and, for the conformant mask, encode) synch-safe sizes."""

    def __init__(self, mask: int = LEGACY_MASK):
        self.mask = mask

    @property
    def strict(self) -> bool:
        return self.mask == SYNCHSAFE_MASK

    def decode(self, raw: int) -> int:
        """Collapse a raw big-endian 32-bit value read from the header."""
        mask = self.mask
        return (
            (raw & mask)
            | ((raw & (mask << 8)) >> 1)
            | ((raw & (mask << 16)) >> 2)
            | ((raw & (mask << 24)) >> 3)
        )

    @staticmethod
    def encode(value: int) -> int:
        """Spread a size over four 7-bit groups (inverse of the 0x7F decoding)."""
        if not 0 <= value <= MAX_SIZE:
            raise ValueError(f"Synch-safe size out of range: {value}")
        return (
            (value & 0x7F)
            | ((value & 0x3F80) << 1)
            | ((value & 0x1FC000) << 2)
            | ((value & 0xFE00000) << 3)
        )

    def __repr__(self):
        return f"SizeCodec(mask=0x{self.mask:02x})"


legacy = SizeCodec(LEGACY_MASK)
strict = SizeCodec(SYNCHSAFE_MASK)


def decode_size(raw: int, mask: int = LEGACY_MASK) -> int:
    """Shortcut for SizeCodec(mask).decode(raw)."""
    codec = {LEGACY_MASK: legacy, SYNCHSAFE_MASK: strict}.get(mask) or SizeCodec(mask)
    return codec.decode(raw)
