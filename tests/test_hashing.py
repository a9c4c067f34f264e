import pytest

from bftreplica.hashing import DIGEST_LENGTH, Hash


def test_default_hash_is_zero_and_set():
    value = Hash()
    assert value.is_zero()
    assert value.is_set
    assert not value.is_dummy()


def test_dummy_hash_is_not_set():
    value = Hash.dummy()
    assert value.is_dummy()
    assert value.is_zero()


def test_equality_ignores_flag():
    assert Hash() == Hash.dummy()
    assert Hash(bytes(range(32))) != Hash()


def test_non_zero_digest():
    assert not Hash(bytes(range(32))).is_zero()


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Hash(b"abc")


def test_to_print_shows_first_six_bytes():
    assert Hash().to_print() == "HASH[1-48 48 48 48 48 48]"
    assert Hash(bytes(range(32)), False).to_print() == "HASH[0-0 1 2 3 4 5]"


def test_to_string_is_digest_then_flag():
    text = Hash().to_string()
    assert text == "0" * DIGEST_LENGTH + "1"
    assert Hash.dummy().to_string().endswith("0")


def test_serialize_layout():
    assert Hash().serialize() == b"0" * DIGEST_LENGTH + b"\x01"
    assert len(Hash.dummy().serialize()) == Hash.SIZE


@pytest.mark.parametrize("is_set", [True, False])
def test_round_trip(is_set):
    original = Hash(bytes(range(100, 132)), is_set)
    restored = Hash.deserialize(original.serialize())
    assert restored == original
    assert restored.is_set == is_set


def test_deserialize_wrong_length():
    with pytest.raises(ValueError):
        Hash.deserialize(b"0" * 10)


def test_usable_in_sets():
    assert len({Hash(), Hash.dummy(), Hash(bytes(range(32)))}) == 2