"""Ordered groups of replica identifiers."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_U32 = struct.Struct("<I")


@dataclass(frozen=True)
class Group:
    """An ordered collection of replica ids."""

    members: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    @property
    def size(self) -> int:
        return len(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    def to_print(self) -> str:
        joined = ",".join(str(member) for member in self.members)
        return f"GROUP[{self.size}-{joined}]"

    def to_string(self) -> str:
        return str(self.size) + "".join(str(member) for member in self.members)

    def serialize(self) -> bytes:
        return _U32.pack(self.size) + b"".join(_U32.pack(m) for m in self.members)

    @classmethod
    def deserialize(cls, data: bytes) -> Group:
        data = bytes(data)
        if len(data) < _U32.size:
            raise ValueError("serialized group is missing its size")
        (size,) = _U32.unpack_from(data)
        expected = _U32.size * (size + 1)
        if len(data) != expected:
            raise ValueError(f"serialized group of {size} members needs {expected} bytes, got {len(data)}")
        members = tuple(value for (value,) in _U32.iter_unpack(data[_U32.size:]))
        return cls(members)