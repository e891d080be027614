"""Random 128-bit identifiers for nodes, pins and links."""

from __future__ import annotations

import secrets
import zlib
from dataclasses import dataclass

_SIZE = 16
_NIL = bytes(_SIZE)


@dataclass(frozen=True, order=True)
class UUID:
    """A 128-bit identifier following RFC 4122 version 4.

    The default value is the nil identifier (all zero bytes). Identifiers
    compare and order by their raw bytes and are hashable.
    """

    raw: bytes = _NIL

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != _SIZE:
            raise ValueError(f"a UUID holds exactly {_SIZE} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def generate(cls) -> UUID:
        """Return a new random version-4 identifier."""
        data = bytearray(secrets.token_bytes(_SIZE))
        data[6] = (data[6] & 0x0F) | 0x40  # version 4
        data[8] = (data[8] & 0x3F) | 0x80  # RFC 4122 variant
        return cls(bytes(data))

    def __str__(self) -> str:
        text = self.raw.hex()
        return "-".join((text[:8], text[8:12], text[12:16], text[16:20], text[20:]))

    def to_imnodes_id(self) -> int:
        """Return a signed 32-bit integer derived from the identifier's text.

        Distinct identifiers may collide; the value is only meant as a
        compact handle for an editor that needs plain integer ids.
        """
        value = zlib.crc32(str(self).encode("ascii"))
        return value - (1 << 32) if value >= (1 << 31) else value