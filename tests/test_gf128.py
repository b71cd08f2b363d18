import pytest

from aeadkit.gf128 import Element

ONE = bytes(15) + b"\x01"
A = bytes.fromhex("1122334455667700ffeeddccbbaa9988")
B = bytes.fromhex("00112233445566778899aabbcceeff0a")
C = bytes.fromhex("8899aabbccddeeff0011223344556677")


def _product(a, b):
    element = Element()
    element.mul_sum(a, b)
    return element.to_bytes()


def _xor(a, b):
    return bytes(x ^ y for x, y in zip(a, b))


def test_new_element_is_zero():
    assert Element().to_bytes() == bytes(16)


@pytest.mark.parametrize("block", [A, B, C])
def test_one_is_multiplicative_identity(block):
    assert _product(block, ONE) == block
    assert _product(ONE, block) == block


@pytest.mark.parametrize("block", [A, B, C])
def test_zero_annihilates(block):
    assert _product(block, bytes(16)) == bytes(16)


def test_multiplication_is_commutative():
    assert _product(A, B) == _product(B, A)
    assert _product(B, C) == _product(C, B)


def test_multiplication_distributes_over_addition():
    element = Element()
    element.mul_sum(A, B)
    element.mul_sum(A, C)
    assert element.to_bytes() == _product(A, _xor(B, C))


def test_multiplication_is_associative():
    left = _product(_product(A, B), C)
    right = _product(A, _product(B, C))
    assert left == right


def test_adding_same_product_twice_cancels():
    element = Element()
    element.mul_sum(A, B)
    element.mul_sum(A, B)
    assert element.to_bytes() == bytes(16)


def test_reduction_by_field_polynomial():
    x127 = b"\x80" + bytes(15)
    x = bytes(15) + b"\x02"
    # x^128 = x^7 + x^2 + x + 1
    assert _product(x127, x) == bytes(15) + b"\x87"


def test_product_below_degree_128_is_not_reduced():
    x8 = bytes(14) + b"\x01\x00"
    assert _product(x8, x8) == bytes(13) + b"\x01\x00\x00"


@pytest.mark.parametrize("bad", [b"", bytes(15), bytes(17)])
def test_wrong_block_length_is_rejected(bad):
    element = Element()
    with pytest.raises(ValueError):
        element.mul_sum(bad, A)
    with pytest.raises(ValueError):
        element.mul_sum(A, bad)
    assert element.to_bytes() == bytes(16)