"""Image I/O using OpenCV: files, in-memory bytes and base64 transport."""

import base64
import binascii
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from models.raster import RasterImage
from engines.errors import DecodeError, UnsupportedFormat

SUPPORTED_EXTENSIONS = ('.bmp', '.png', '.jpg', '.jpeg', '.tif', '.tiff', '.webp')
TRANSPORT_FORMAT = '.bmp'


def _from_cv(img: np.ndarray) -> RasterImage:
    """OpenCV BGR / gray buffer to RasterImage."""
    if img.ndim == 3 and img.shape[2] == 4:
        img = cv2.cvtColor(img, cv2.COLOR_BGRA2RGB)
    elif img.ndim == 3 and img.shape[2] == 3:
        img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    return RasterImage(img)


def _to_cv(image: RasterImage) -> np.ndarray:
    if image.is_gray:
        return np.ascontiguousarray(image.pixels)
    return cv2.cvtColor(image.pixels, cv2.COLOR_RGB2BGR)


def _check_extension(operation: str, ext: str) -> str:
    ext = ext.lower()
    if not ext.startswith('.'):
        ext = '.' + ext
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormat(operation, f"cannot encode '{ext}' (supported: {', '.join(SUPPORTED_EXTENSIONS)})")
    return ext


def load_image(path: Union[str, Path]) -> RasterImage:
    """Load image as LUMA8 (single-channel files) or RGB8 (everything else)."""
    img = cv2.imread(str(path), cv2.IMREAD_ANYCOLOR)
    if img is None:
        raise DecodeError('load_image', f"could not load image from {path}")
    return _from_cv(img)


def save_image(image: RasterImage, path: Union[str, Path]) -> None:
    """Save image; the format follows the file extension."""
    _check_extension('save_image', Path(path).suffix)
    if not cv2.imwrite(str(path), _to_cv(image)):
        raise UnsupportedFormat('save_image', f"could not write {path}")


def decode_image(data: bytes) -> RasterImage:
    """Decode an encoded image (any format OpenCV reads)."""
    buffer = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buffer, cv2.IMREAD_ANYCOLOR) if buffer.size else None
    if img is None:
        raise DecodeError('decode_image', "bytes are not a readable image")
    return _from_cv(img)


def encode_image(image: RasterImage, ext: str = TRANSPORT_FORMAT) -> bytes:
    ext = _check_extension('encode_image', ext)
    ok, buffer = cv2.imencode(ext, _to_cv(image))
    if not ok:
        raise UnsupportedFormat('encode_image', f"encoder for '{ext}' failed")
    return buffer.tobytes()


def decode_base64(text: str) -> RasterImage:
    """Decode a base64 transport string."""
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError('decode_base64', f"invalid base64: {e}") from e
    return decode_image(data)


def encode_base64(image: RasterImage, ext: str = TRANSPORT_FORMAT) -> str:
    """Encode to a base64 transport string (BMP by default)."""
    return base64.b64encode(encode_image(image, ext)).decode('ascii')
