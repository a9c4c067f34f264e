"""Accumulators summarising the highest prepared block among new-view messages."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from bftreplica.hashing import Hash

_HEAD = struct.Struct("<?I")
_TAIL = struct.Struct("<II")


@dataclass(frozen=True)
class Accumulator:
    """Proposal view, highest prepared hash and view, and the number of votes."""

    propose_view: int = 0
    prepare_hash: Hash = field(default_factory=Hash)
    prepare_view: int = 0
    size: int = 0
    is_set: bool = True

    SIZE = _HEAD.size + Hash.SIZE + _TAIL.size

    @classmethod
    def unset(cls) -> Accumulator:
        """Return an accumulator that carries no value."""
        return cls(is_set=False)

    def to_print(self) -> str:
        return (
            f"ACCUMULATOR[{int(self.is_set)},{self.propose_view},"
            f"{self.prepare_hash.to_print()},{self.prepare_view},{self.size}]"
        )

    def to_string(self) -> str:
        return (
            f"{int(self.is_set)}{self.propose_view}"
            f"{self.prepare_hash.to_string()}{self.prepare_view}{self.size}"
        )

    def serialize(self) -> bytes:
        return (
            _HEAD.pack(self.is_set, self.propose_view)
            + self.prepare_hash.serialize()
            + _TAIL.pack(self.prepare_view, self.size)
        )

    @classmethod
    def deserialize(cls, data: bytes) -> Accumulator:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"a serialized accumulator holds {cls.SIZE} bytes, got {len(data)}")
        is_set, propose_view = _HEAD.unpack_from(data)
        hash_end = _HEAD.size + Hash.SIZE
        prepare_hash = Hash.deserialize(data[_HEAD.size:hash_end])
        prepare_view, size = _TAIL.unpack_from(data, hash_end)
        return cls(propose_view, prepare_hash, prepare_view, size, is_set)