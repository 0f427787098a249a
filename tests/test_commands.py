"""Tests for the string command surface."""

import numpy as np
import pytest
from models.raster import RasterImage
from engines.commands import COMMANDS, BINARY_COMMANDS, parse_float, parse_int, split_args, transform_image
from engines.errors import InvalidArguments, InvalidOperation, TransformError
from engines.geometry import resize
from engines.spatial_filter import gaussian
from engines.tone import to_binary
from models.params import GaussianParams


@pytest.fixture
def image():
    np.random.seed(7)
    return RasterImage(np.random.randint(0, 256, (12, 10, 3), dtype=np.uint8))


def test_parse_fallbacks():
    assert parse_float("2.5", 1.0) == 2.5
    assert parse_float(" 3 ", 1.0) == 3.0
    assert parse_float("abc", 1.0) == 1.0
    assert parse_float(None, 1.0) == 1.0
    assert parse_float("nan", 1.0) == 1.0
    assert parse_float("inf", 1.0) == 1.0
    assert parse_int("7", 3) == 7
    assert parse_int("7.5", 3) == 3
    assert parse_int(None, 3) == 3


def test_split_args():
    assert split_args("op", "1, 2", 2) == ["1", "2"]
    assert split_args("op", "", 2) == [None, None]
    assert split_args("op", None, 4) == [None] * 4
    assert split_args("op", "a,", 2) == ["a", ""]


def test_errors_render_operation_and_cause():
    error = InvalidOperation("fft/wavelet", "unknown command")
    assert str(error) == "fft/wavelet: unknown command"
    assert isinstance(error, TransformError)


@pytest.mark.parametrize("command, arg, arity", [
    ("filter/gaussian", "5", 2),
    ("fft/homomorphic", "0.5,2,1", 4),
    ("geometric/translate", "1,2,3", 2),
    ("geometric/resize", "20", 2),
    ("geometric/stretch", "1,1,1", 2),
])
def test_wrong_arity(image, command, arg, arity):
    with pytest.raises(InvalidArguments) as info:
        transform_image(command, image, arg)
    assert info.value.expected == arity
    assert info.value.operation == command
    assert command in str(info.value)


def test_unknown_command(image):
    with pytest.raises(InvalidOperation):
        transform_image("filter/bilateral", image)
    with pytest.raises(InvalidOperation):
        transform_image("", image)


def test_binary_command_needs_second_image(image):
    with pytest.raises(InvalidArguments):
        transform_image("binary_op/add", image)


def test_binary_command(image):
    doubled = transform_image("binary_op/add", image, other=image).pixels
    expected = np.minimum(image.pixels.astype(int) * 2, 255)
    assert np.array_equal(doubled, expected)


def test_missing_values_take_defaults(image):
    assert transform_image("geometric/resize", image, "x,6").pixels.shape == (6, 10, 3)
    assert transform_image("geometric/resize", image, "").same_pixels(image)
    assert transform_image("color/to_binary", image, "oops").same_pixels(to_binary(image))
    assert transform_image("filter/gaussian", image, "5,").same_pixels(gaussian(image, GaussianParams(5)))
    assert transform_image("geometric/rotate", image, "nope").same_pixels(image)


def test_argument_values_reach_engine(image):
    assert transform_image("geometric/resize", image, "4, 3").same_pixels(resize(image, 4, 3))
    assert transform_image("geometric/mirror", image, "y").same_pixels(
        RasterImage(image.pixels[::-1])
    )
    assert transform_image("geometric/stretch", image, "2,1").width == 20


def test_command_list():
    assert len(COMMANDS) == 34
    assert COMMANDS == sorted(COMMANDS)
    assert set(BINARY_COMMANDS) <= set(COMMANDS)
    for name in ("color/invert", "filter/roberts_sharpen", "fft/dft_idft", "geometric/stretch", "fourier_desc"):
        assert name in COMMANDS


@pytest.mark.parametrize("arg", [None, "", "3", "abc", "1,2", "0.5,2,1,10", "-4"])
def test_every_command_yields_image_or_argument_error(image, arg):
    """Any argument text produces an image or InvalidArguments, never a crash."""
    for command in COMMANDS:
        try:
            result = transform_image(command, image, arg, other=image)
        except InvalidArguments:
            continue
        assert isinstance(result, RasterImage)
        assert result.width >= 1 and result.height >= 1
