"""Relative luminance of each colour (WCAG 2.1 definition).

Channels are normalised to 0-1, linearised with the sRGB transfer
curve, then weighted 0.2126 R + 0.7152 G + 0.0722 B.
Black is 0.0, white is 1.0.

Example:
    uv run contrast-tool luminance '#ffffff' 242,108,167
"""

from contrast_checker.core.luminance import luminance
from contrast_checker.core.types import ColorInput, Command, Report

command = Command(
    name='luminance',
    help='Relative luminance (0 black .. 1 white) per colour.',
)


@command.run
def run(colors: list[ColorInput], report: Report, args) -> None:
    for item in colors:
        report.add(item.key, 'luminance', {'luminance': luminance(item.color)})
