"""Blocks of transactions chained by hash."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from bftreplica.hashing import Hash


class TransactionLike(Protocol):
    """What a block needs from the transactions it carries."""

    def to_string(self) -> str: ...

    def to_print(self) -> str: ...


@dataclass(frozen=True)
class Block:
    """A block extending ``previous_hash`` with its non-dummy transactions."""

    previous_hash: Hash = field(default_factory=Hash)
    transactions: Sequence[TransactionLike] = ()
    is_set: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "transactions", tuple(self.transactions))

    @classmethod
    def genesis(cls) -> Block:
        return cls()

    @classmethod
    def dummy(cls) -> Block:
        return cls(is_set=False)

    @property
    def size(self) -> int:
        """Number of non-dummy transactions."""
        return len(self.transactions)

    def is_dummy(self) -> bool:
        return not self.is_set

    def extends(self, previous_hash: Hash) -> bool:
        """True if this block directly extends the block with ``previous_hash``."""
        return self.previous_hash == previous_hash

    def hash(self) -> Hash:
        text = self.to_string().encode("latin-1")
        return Hash(hashlib.sha256(text).digest())

    def to_print(self) -> str:
        body = "".join(t.to_print() for t in self.transactions)
        return f"BLOCK[{int(self.is_set)},{self.previous_hash.to_print()},{self.size},{{{body}}}]"

    def to_string(self) -> str:
        body = "".join(t.to_string() for t in self.transactions)
        return f"{int(self.is_set)}{self.previous_hash.to_string()}{self.size}{body}"