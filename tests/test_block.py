from dataclasses import dataclass

from bftreplica.block import Block
from bftreplica.hashing import Hash


@dataclass(frozen=True)
class Tx:
    client: int
    number: int

    def to_string(self) -> str:
        return f"{self.client}{self.number}"

    def to_print(self) -> str:
        return f"TX[{self.client},{self.number}]"


def test_genesis_block():
    block = Block.genesis()
    assert not block.is_dummy()
    assert block.size == 0
    assert block.previous_hash == Hash()


def test_dummy_block():
    block = Block.dummy()
    assert block.is_dummy()
    assert block.to_string().startswith("0")


def test_size_counts_transactions():
    block = Block(Hash(), [Tx(1, 1), Tx(1, 2)])
    assert block.size == 2
    assert block.transactions == (Tx(1, 1), Tx(1, 2))


def test_to_string():
    block = Block(Hash(), [Tx(1, 2)])
    assert block.to_string() == "1" + Hash().to_string() + "1" + "12"


def test_to_print():
    block = Block(Hash(), [Tx(1, 2)])
    assert block.to_print() == "BLOCK[1," + Hash().to_print() + ",1,{TX[1,2]}]"


def test_hash_is_deterministic_and_set():
    first = Block(Hash(), [Tx(1, 1)]).hash()
    second = Block(Hash(), [Tx(1, 1)]).hash()
    assert first == second
    assert first.is_set
    assert not first.is_zero()


def test_hash_depends_on_contents():
    assert Block(Hash(), [Tx(1, 1)]).hash() != Block(Hash(), [Tx(1, 2)]).hash()
    assert Block.genesis().hash() != Block.dummy().hash()


def test_chain_extends():
    parent = Block.genesis()
    child = Block(parent.hash(), [Tx(2, 5)])
    assert child.extends(parent.hash())
    assert not child.extends(Hash())


def test_equality():
    assert Block(Hash(), [Tx(1, 1)]) == Block(Hash(), [Tx(1, 1)])
    assert Block(Hash(), [Tx(1, 1)]) != Block(Hash(), [Tx(1, 1), Tx(1, 2)])
    assert Block.genesis() != Block.dummy()