"""Bitmap fonts: GB2312 hanzi libraries (HZK16/HZK24) and the ASC16 ASCII font."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

ASCII_WIDTH = 8
ASCII_HEIGHT = 16
ASCII_GLYPH_BYTES = ASCII_WIDTH * ASCII_HEIGHT // 8
HANZI_SIZES = (16, 24)
ROW_CELLS = 94
_CODE_BASE = 160

Pixel = tuple[int, int]

_RMB_BITMAP = (
    "000000000000",
    "111110001111",
    "011000000110",
    "011000000100",
    "001100001100",
    "000100001000",
    "000110011000",
    "000011110000",
    "000001100000",
    "111111111111",
    "000001100000",
    "000001100000",
    "000001100000",
    "000001100000",
    "000001100000",
    "111111111111",
    "000001100000",
    "000001100000",
    "000001100000",
    "000001100000",
    "000001100000",
    "000111111000",
    "000000000000",
    "000000000000",
)


def hanzi_offset(first: int, second: int, glyph_bytes: int) -> int:
    """Byte offset of a GB2312 character's glyph in a hanzi library.

    ``first`` and ``second`` are the two bytes of the character's code; both
    must lie in 0xA1..0xFF.
    """
    for byte in (first, second):
        if not 0xA1 <= byte <= 0xFF:
            raise ValueError(f"not a GB2312 code byte: {byte:#x}")
    area = first - _CODE_BASE
    position = second - _CODE_BASE
    return (ROW_CELLS * (area - 1) + (position - 1)) * glyph_bytes


def glyph_pixels(data: bytes, width: int, height: int) -> list[Pixel]:
    """Decode a row-major, most-significant-bit-first bitmap into lit (x, y) pixels."""
    row_bytes = (width + 7) // 8
    if len(data) < row_bytes * height:
        raise ValueError(
            f"a {width}x{height} glyph needs {row_bytes * height} bytes, got {len(data)}"
        )
    return [
        (x, y)
        for y in range(height)
        for x in range(width)
        if data[y * row_bytes + x // 8] & (0x80 >> (x % 8))
    ]


def scale_pixels(pixels: Iterable[Pixel], scale_x: int, scale_y: int) -> list[Pixel]:
    """Enlarge each pixel into a ``scale_x`` by ``scale_y`` block."""
    if scale_x < 1 or scale_y < 1:
        raise ValueError(f"scale factors must be positive, got {scale_x}x{scale_y}")
    return [
        (x * scale_x + m, y * scale_y + n)
        for x, y in pixels
        for m in range(scale_x)
        for n in range(scale_y)
    ]


def rmb_symbol(scale_x: int = 1, scale_y: int = 1) -> list[Pixel]:
    """Pixels of the 12x24 yuan sign, enlarged by the given factors."""
    base = [
        (x, y)
        for y, row in enumerate(_RMB_BITMAP)
        for x, cell in enumerate(row)
        if cell == "1"
    ]
    return scale_pixels(base, scale_x, scale_y)


def _read_block(path: Path, offset: int, size: int) -> bytes:
    with path.open("rb") as handle:
        handle.seek(offset)
        data = handle.read(size)
    return data.ljust(size, b"\0")


class FontLibrary:
    """A GB2312 hanzi library paired with the ASC16 font for mixed text."""

    def __init__(
        self,
        hanzi_path: str | os.PathLike[str],
        ascii_path: str | os.PathLike[str],
        hanzi_size: int = 16,
    ):
        if hanzi_size not in HANZI_SIZES:
            raise ValueError(f"hanzi size must be one of {HANZI_SIZES}, got {hanzi_size}")
        self.hanzi_path = Path(hanzi_path)
        self.ascii_path = Path(ascii_path)
        for path in (self.hanzi_path, self.ascii_path):
            if not path.is_file():
                raise FileNotFoundError(f"cannot open font {path}")
        self.hanzi_size = hanzi_size

    @property
    def hanzi_glyph_bytes(self) -> int:
        """Size in bytes of one hanzi glyph."""
        return self.hanzi_size * self.hanzi_size // 8

    def hanzi_glyph(self, code: bytes | str) -> bytes:
        """Raw bitmap of one hanzi, given as a character or its two GB2312 bytes."""
        raw = code.encode("gb2312") if isinstance(code, str) else bytes(code)
        if len(raw) != 2:
            raise ValueError(f"a hanzi code is two bytes, got {raw!r}")
        offset = hanzi_offset(raw[0], raw[1], self.hanzi_glyph_bytes)
        return _read_block(self.hanzi_path, offset, self.hanzi_glyph_bytes)

    def ascii_glyph(self, char: str | int) -> bytes:
        """Raw 8x16 bitmap of one ASCII character."""
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError(f"expected a single character, got {char!r}")
            code = ord(char)
        else:
            code = char
        if not 0 <= code < 256:
            raise ValueError(f"character code out of range: {code}")
        return _read_block(self.ascii_path, code * ASCII_GLYPH_BYTES, ASCII_GLYPH_BYTES)

    def render_text(self, text: str | bytes, scale_x: int = 1, scale_y: int = 1) -> list[Pixel]:
        """Lit pixels of a line of mixed hanzi and ASCII text, relative to its origin.

        With a 16-pixel library, ASCII is enlarged like the hanzi and lowered by
        two scaled rows. With a 24-pixel library, ASCII is drawn twice as large
        and raised by two scaled rows. Text ends at the first NUL byte.
        """
        if scale_x < 1 or scale_y < 1:
            raise ValueError(f"scale factors must be positive, got {scale_x}x{scale_y}")
        raw = text.encode("gb2312") if isinstance(text, str) else bytes(text)
        raw = raw.split(b"\0", 1)[0]

        if self.hanzi_size == 16:
            ascii_sx, ascii_sy, ascii_dy = scale_x, scale_y, 2 * scale_y
        else:
            ascii_sx, ascii_sy, ascii_dy = 2 * scale_x, 2 * scale_y, -2 * scale_y

        pixels: list[Pixel] = []
        cursor = 0
        index = 0
        while index < len(raw):
            byte = raw[index]
            if not byte & 0x80:
                glyph = glyph_pixels(self.ascii_glyph(byte), ASCII_WIDTH, ASCII_HEIGHT)
                pixels.extend(
                    (cursor + px, ascii_dy + py)
                    for px, py in scale_pixels(glyph, ascii_sx, ascii_sy)
                )
                cursor += ASCII_WIDTH * ascii_sx
                index += 1
            else:
                if index + 1 >= len(raw):
                    raise ValueError("text ends in the middle of a hanzi")
                data = self.hanzi_glyph(raw[index:index + 2])
                glyph = glyph_pixels(data, self.hanzi_size, self.hanzi_size)
                pixels.extend(
                    (cursor + px, py) for px, py in scale_pixels(glyph, scale_x, scale_y)
                )
                cursor += self.hanzi_size * scale_x
                index += 2
        return pixels