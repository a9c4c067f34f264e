"""Fixed-size SHA-256 digests as used by blocks and certificates."""

from __future__ import annotations

import struct
from dataclasses import dataclass

DIGEST_LENGTH = 32
_ZERO_DIGEST = b"0" * DIGEST_LENGTH


@dataclass(frozen=True, eq=False)
class Hash:
    """A 32-byte digest with a flag telling real hashes from dummy ones.

    Two hashes are equal when their digests are equal; the flag is ignored.
    """

    digest: bytes = _ZERO_DIGEST
    is_set: bool = True

    SIZE = DIGEST_LENGTH + 1

    def __post_init__(self) -> None:
        digest = bytes(self.digest)
        if len(digest) != DIGEST_LENGTH:
            raise ValueError(
                f"a hash digest holds {DIGEST_LENGTH} bytes, got {len(digest)}"
            )
        object.__setattr__(self, "digest", digest)

    @classmethod
    def dummy(cls) -> Hash:
        """Return the dummy hash: the zero digest, not set."""
        return cls(_ZERO_DIGEST, False)

    def is_dummy(self) -> bool:
        return not self.is_set

    def is_zero(self) -> bool:
        """True if every byte of the digest is the character '0'."""
        return self.digest == _ZERO_DIGEST

    def to_print(self) -> str:
        prefix = " ".join(str(byte) for byte in self.digest[:6])
        return f"HASH[{int(self.is_set)}-{prefix}]"

    def to_string(self) -> str:
        """Raw digest characters followed by the flag, one char per byte."""
        return self.digest.decode("latin-1") + str(int(self.is_set))

    def serialize(self) -> bytes:
        return self.digest + struct.pack("<?", self.is_set)

    @classmethod
    def deserialize(cls, data: bytes) -> Hash:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"a serialized hash holds {cls.SIZE} bytes, got {len(data)}")
        (is_set,) = struct.unpack("<?", data[DIGEST_LENGTH:])
        return cls(data[:DIGEST_LENGTH], is_set)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hash):
            return NotImplemented
        return self.digest == other.digest

    def __hash__(self) -> int:
        return hash(self.digest)