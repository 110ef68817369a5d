"""Two-digit hex codec for 8-bit colour channels."""

from __future__ import annotations

import enum
import string

# ASCII only: int(ch, 16) would also accept unicode digits such as '٣'
_NIBBLES: dict[str, int] = {ch: int(ch, 16) for ch in string.hexdigits}


class HexDecodeErrorKind(enum.Enum):
    INVALID_LENGTH = 'invalid length'
    LEFT_DIGIT_INVALID = 'left digit is not a hex digit'
    RIGHT_DIGIT_INVALID = 'right digit is not a hex digit'
    LEFT_DIGIT_OUT_OF_RANGE = 'left digit out of range'
    RIGHT_DIGIT_OUT_OF_RANGE = 'right digit out of range'


class HexDecodeError(ValueError):
    """A two-digit hex string could not be decoded to a byte."""

    def __init__(self, kind: HexDecodeErrorKind, text: str):
        super().__init__(f'{kind.value}: {text!r}')
        self.kind = kind
        self.text = text


def decode_hex_byte(text: str) -> int:
    """Decode exactly two hex digits ('1a', 'FF') into 0..255.

    The first digit is the high nibble, the second the low nibble.
    """
    if len(text) != 2:
        raise HexDecodeError(HexDecodeErrorKind.INVALID_LENGTH, text)

    left = _NIBBLES.get(text[0])
    if left is None:
        raise HexDecodeError(HexDecodeErrorKind.LEFT_DIGIT_INVALID, text)

    right = _NIBBLES.get(text[1])
    if right is None:
        raise HexDecodeError(HexDecodeErrorKind.RIGHT_DIGIT_INVALID, text)

    # Unreachable with the table above, kept so a table change cannot overflow a byte
    if left > 15:
        raise HexDecodeError(HexDecodeErrorKind.LEFT_DIGIT_OUT_OF_RANGE, text)
    if right > 15:
        raise HexDecodeError(HexDecodeErrorKind.RIGHT_DIGIT_OUT_OF_RANGE, text)

    return left * 16 + right


def encode_hex_byte(value: int) -> str:
    """Encode 0..255 as two lowercase hex digits."""
    if not 0 <= value <= 255:
        raise ValueError(f'byte out of range: {value}')
    return f'{value:02x}'
