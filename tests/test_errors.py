import pytest

from aeadkit.errors import AeadError, check_tag_size


@pytest.mark.parametrize("size", [4, 8, 12, 16])
def test_valid_tag_sizes_are_returned(size):
    assert check_tag_size(size) == size


@pytest.mark.parametrize("size", [-1, 0, 3, 17, 32])
def test_out_of_range_tag_sizes_rejected(size):
    with pytest.raises(ValueError):
        check_tag_size(size)


@pytest.mark.parametrize("size", ["16", 16.0, None, True])
def test_non_integer_tag_sizes_rejected(size):
    with pytest.raises(TypeError):
        check_tag_size(size)


def test_aead_error_carries_message():
    err = AeadError("tampered")
    assert str(err) == "tampered"
    assert isinstance(err, Exception)