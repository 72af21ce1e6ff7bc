import pytest

from novachain.poh import generate_poh, random_seed

# A standard SHA-256 test message, split into a 48-byte prefix and a
# little-endian 64-bit counter taken from its final eight bytes.
_VECTOR_MESSAGE = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
_VECTOR_DIGEST = bytes.fromhex(
    "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
)


def test_digest_is_32_bytes():
    assert len(generate_poh(b"seed", 1)) == 32


def test_digest_matches_known_vector():
    previous = _VECTOR_MESSAGE[:-8]
    counter = int.from_bytes(_VECTOR_MESSAGE[-8:], "little")
    assert generate_poh(previous, counter) == _VECTOR_DIGEST
    assert generate_poh(previous, counter) == _VECTOR_DIGEST


def test_counter_changes_digest():
    assert generate_poh(b"abc", 1) != generate_poh(b"abc", 2)


def test_previous_changes_digest():
    assert generate_poh(b"abc", 1) != generate_poh(b"abd", 1)


def test_bytearray_and_bytes_agree():
    assert generate_poh(bytearray(b"xyz"), 3) == generate_poh(b"xyz", 3)


def test_chain_links_are_distinct():
    seed = random_seed()
    d1 = generate_poh(seed, 1)
    d2 = generate_poh(d1, 2)
    assert len({seed, d1, d2}) == 3
    assert generate_poh(d1, 2) == d2


def test_max_counter_accepted():
    assert len(generate_poh(b"", 2**64 - 1)) == 32


@pytest.mark.parametrize("counter", [-1, 2**64])
def test_counter_out_of_range(counter):
    with pytest.raises(ValueError):
        generate_poh(b"", counter)


def test_counter_must_be_int():
    with pytest.raises(TypeError):
        generate_poh(b"", "1")


def test_random_seed_length_and_variation():
    a = random_seed()
    b = random_seed()
    assert len(a) == 32
    assert len(b) == 32
    assert a != b