import pytest

from mindweaver.identifiers import UUID


def test_default_is_nil():
    assert UUID().raw == bytes(16)
    assert str(UUID()) == "00000000-0000-0000-0000-000000000000"


def test_string_format_of_known_bytes():
    uid = UUID(bytes(range(16)))
    assert str(uid) == "00010203-0405-0607-0809-0a0b0c0d0e0f"


def test_generated_string_layout():
    text = str(UUID.generate())
    assert len(text) == 36
    assert [i for i, ch in enumerate(text) if ch == "-"] == [8, 13, 18, 23]
    assert all(ch in "0123456789abcdef-" for ch in text)


def test_generated_version_and_variant_bits():
    for _ in range(50):
        raw = UUID.generate().raw
        assert raw[6] >> 4 == 4
        assert raw[8] >> 6 == 0b10


def test_generated_identifiers_are_distinct():
    ids = {UUID.generate() for _ in range(200)}
    assert len(ids) == 200


def test_equality_and_hash_follow_bytes():
    a = UUID(bytes(range(16)))
    b = UUID(bytearray(range(16)))
    assert a == b
    assert hash(a) == hash(b)
    assert {a: "x"}[b] == "x"


def test_ordering_is_bytewise():
    low = UUID(bytes([0] * 15 + [1]))
    high = UUID(bytes([1] + [0] * 15))
    assert low < high
    assert sorted([high, UUID(), low]) == [UUID(), low, high]


@pytest.mark.parametrize("length", [0, 15, 17])
def test_wrong_length_rejected(length):
    with pytest.raises(ValueError):
        UUID(bytes(length))


def test_imnodes_id_is_stable_and_in_int32_range():
    uid = UUID.generate()
    value = uid.to_imnodes_id()
    assert value == UUID(uid.raw).to_imnodes_id()
    assert -(2**31) <= value < 2**31


def test_identifier_is_immutable():
    uid = UUID.generate()
    with pytest.raises(AttributeError):
        uid.raw = bytes(16)