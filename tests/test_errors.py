import pytest

from viuer.errors import (
    ImageError,
    InvalidConfigurationError,
    KittyNotSupportedError,
    KittyResponseError,
    ViuError,
)


def test_kitty_not_supported_message():
    err = KittyNotSupportedError()
    assert isinstance(err, ViuError)
    assert str(err) == "Kitty graphics protocol not supported"


def test_invalid_configuration_message():
    err = InvalidConfigurationError("absolute_offset is true but y offset is negative")
    assert err.message == "absolute_offset is true but y offset is negative"
    assert str(err) == "Invalid Configuration: absolute_offset is true but y offset is negative"


def test_image_error_keeps_cause():
    cause = ValueError("truncated data")
    err = ImageError(cause)
    assert err.cause is cause
    assert str(err).startswith("Image error: ")
    assert str(cause) in str(err)


def test_kitty_response_keeps_keys():
    keys = ["O", "X"]
    err = KittyResponseError(keys)
    assert err.response == keys
    assert str(err).startswith("Kitty response: ")
    assert repr(keys) in str(err)


@pytest.mark.parametrize(
    "error, prefix",
    [
        (ImageError("x"), "Image error: "),
        (InvalidConfigurationError("x"), "Invalid Configuration: "),
        (KittyResponseError([]), "Kitty response: "),
        (KittyNotSupportedError(), "Kitty graphics protocol not supported"),
    ],
)
def test_all_errors_caught_by_base(error, prefix):
    with pytest.raises(ViuError) as info:
        raise error
    assert info.value is error
    assert str(info.value).startswith(prefix)