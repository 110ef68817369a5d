"""Colour model: three 8-bit sRGB channels held as floats.

A Color is built either from integer channels or from a hex string
('#RRGGBB' or 'RRGGBB', case-insensitive, surrounding whitespace ignored).
Instances are immutable; normalize() returns a new Color in [0, 1].
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from contrast_checker.core.hexcodec import HexDecodeError, decode_hex_byte, encode_hex_byte

CHANNELS = ('red', 'green', 'blue')

# ASCII whitespace as trimmed from hex input; str.strip() alone would also drop \x1c-\x1f
WHITESPACE = ' \t\n\x0b\x0c\r'


class ColorParseErrorKind(enum.Enum):
    EMPTY_INPUT = 'input is empty'
    NON_ASCII_INPUT = 'input is not ASCII'
    INVALID_LENGTH = 'expected RRGGBB or #RRGGBB'
    INVALID_CHANNEL = 'channel is not valid hex'
    INVALID_TRIPLE = 'expected three comma-separated integers r,g,b'


class ColorParseError(ValueError):
    """A colour string could not be parsed.

    For INVALID_CHANNEL, `channel` names the failing channel and `hex_error`
    holds the HexDecodeError that caused it (also chained as __cause__).
    """

    def __init__(
        self,
        kind: ColorParseErrorKind,
        text: str,
        channel: str | None = None,
        hex_error: HexDecodeError | None = None,
    ):
        message = f'{kind.value}: {text!r}'
        if channel is not None:
            message += f' ({channel}: {hex_error})'
        super().__init__(message)
        self.kind = kind
        self.text = text
        self.channel = channel
        self.hex_error = hex_error


class ChannelRangeError(ValueError):
    """A channel passed to Color.from_channels is not an integer in 0..255."""


@dataclass(frozen=True)
class Color:
    """An sRGB colour. Channels are 0..255 when built by from_channels/from_hex."""

    red: float
    green: float
    blue: float

    @classmethod
    def from_channels(cls, r: int, g: int, b: int) -> Color:
        for name, value in zip(CHANNELS, (r, g, b)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ChannelRangeError(f'{name} must be an int, got {type(value).__name__}')
            if not 0 <= value <= 255:
                raise ChannelRangeError(f'{name} out of range 0..255: {value}')
        return cls(float(r), float(g), float(b))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse '#RRGGBB' or 'RRGGBB'. Raises ColorParseError."""
        if len(text) == 0:
            raise ColorParseError(ColorParseErrorKind.EMPTY_INPUT, text)
        # Before lower(): some non-ASCII characters fold to ASCII letters
        if not text.isascii():
            raise ColorParseError(ColorParseErrorKind.NON_ASCII_INPUT, text)

        digits = text.lower().strip(WHITESPACE)
        has_hash = digits.startswith('#')
        if not ((len(digits) == 6 and not has_hash) or (len(digits) == 7 and has_hash)):
            raise ColorParseError(ColorParseErrorKind.INVALID_LENGTH, text)
        if has_hash:
            digits = digits[1:]

        values = []
        for i, channel in enumerate(CHANNELS):
            pair = digits[i * 2 : i * 2 + 2]
            try:
                values.append(decode_hex_byte(pair))
            except HexDecodeError as e:
                raise ColorParseError(
                    ColorParseErrorKind.INVALID_CHANNEL,
                    text,
                    channel=channel,
                    hex_error=e,
                ) from e
        return cls.from_channels(*values)

    def normalize(self) -> Color:
        """Return a new Color with every channel divided by 255."""
        return Color(self.red / 255.0, self.green / 255.0, self.blue / 255.0)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Format as '#rrggbb'. Channels must be whole numbers in 0..255."""
        parts = []
        for name, value in zip(CHANNELS, self.as_tuple()):
            if not float(value).is_integer():
                raise ValueError(f'{name} is not a whole channel value: {value}')
            parts.append(encode_hex_byte(int(value)))
        return '#' + ''.join(parts)

    def __str__(self) -> str:
        return f'(r: {self.red:g}, g: {self.green:g}, b: {self.blue:g})'


def parse_color(text: str) -> Color:
    """Parse a CLI colour argument: a hex string or an 'r,g,b' decimal triple."""
    if ',' not in text:
        return Color.from_hex(text)

    parts = [p.strip() for p in text.split(',')]
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise ColorParseError(ColorParseErrorKind.INVALID_TRIPLE, text)
    r, g, b = (int(p) for p in parts)
    return Color.from_channels(r, g, b)
