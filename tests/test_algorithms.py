import hashlib

import pytest

from qhash.algorithms import (
    HashAlgorithm,
    algorithm_from_name,
    algorithm_from_value,
    algorithm_name,
    hash_text,
    md4_digest,
    new_hash,
)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", "31d6cfe0d16ae931b73c59d7e0c089c0"),
        (b"abc", "a448017aaf21d8525fc10ae87aa6729d"),
        (b"message digest", "d9130a8164549fe818874806e1c7014b"),
    ],
)
def test_md4_reference_vectors(data, expected):
    assert md4_digest(data).hex() == expected


def test_md4_incremental_matches_one_shot():
    data = bytes(range(256)) * 9
    hasher = new_hash(HashAlgorithm.MD4)
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == md4_digest(data)


def test_md4_digest_length_and_copy():
    hasher = new_hash(HashAlgorithm.MD4)
    hasher.update(b"part one")
    clone = hasher.copy()
    hasher.update(b" and two")
    assert len(hasher.digest()) == 16
    assert clone.digest() == md4_digest(b"part one")
    assert hasher.digest() == md4_digest(b"part one and two")


@pytest.mark.parametrize(
    "algorithm, reference",
    [
        (HashAlgorithm.MD5, "md5"),
        (HashAlgorithm.SHA1, "sha1"),
        (HashAlgorithm.SHA224, "sha224"),
        (HashAlgorithm.SHA256, "sha256"),
        (HashAlgorithm.SHA384, "sha384"),
        (HashAlgorithm.SHA512, "sha512"),
        (HashAlgorithm.SHA3_256, "sha3_256"),
        (HashAlgorithm.SHA3_512, "sha3_512"),
    ],
)
def test_hash_text_matches_hashlib(algorithm, reference):
    text = "héllo wörld"
    assert hash_text(text, algorithm) == hashlib.new(reference, text.encode("utf-8")).hexdigest()


def test_hash_text_md4_is_lowercase_hex():
    result = hash_text("abc", HashAlgorithm.MD4)
    assert result == md4_digest(b"abc").hex()
    assert result == result.lower()


def test_algorithm_from_value():
    assert algorithm_from_value(4) is HashAlgorithm.SHA256
    assert algorithm_from_value("2") is HashAlgorithm.SHA1


@pytest.mark.parametrize("value", [11, -1, "nope", None])
def test_algorithm_from_value_rejects_unknown(value):
    with pytest.raises(ValueError):
        algorithm_from_value(value)


@pytest.mark.parametrize("algorithm", list(HashAlgorithm))
def test_name_round_trip_for_named_algorithms(algorithm):
    name = algorithm_name(algorithm)
    if algorithm in (
        HashAlgorithm.MD4,
        HashAlgorithm.MD5,
        HashAlgorithm.SHA1,
        HashAlgorithm.SHA256,
        HashAlgorithm.SHA512,
    ):
        assert algorithm_from_name(name) is algorithm
    else:
        assert name == "md5"


def test_algorithm_from_name_defaults_to_md5():
    assert algorithm_from_name("whirlpool") is HashAlgorithm.MD5
    assert algorithm_from_name("sha512") is HashAlgorithm.SHA512


def test_algorithm_name_filter():
    assert algorithm_name(HashAlgorithm.MD5, True) == "md5 files (*.md5)"
    assert algorithm_name(HashAlgorithm.MD4, as_filter=True) == "md4 files (*.md4)"
    assert algorithm_name(99) == "md5"