"""Decode each colour and show its channels.

Hex input is split into red/green/blue pairs and each pair decoded to
0..255. Reports the channels, the channels divided by 255, and the
canonical lowercase '#rrggbb' form.

Example:
    uv run contrast-tool parse '#F26CA7' 255,255,255
"""

from contrast_checker.core.types import ColorInput, Command, Report

command = Command(
    name='parse',
    help='Decode each colour. Show channels, normalised channels and hex.',
)


@command.run
def run(colors: list[ColorInput], report: Report, args) -> None:
    for item in colors:
        color = item.color
        hex_value = color.to_hex()
        report.add(
            item.key,
            'parse',
            {
                'rgb': [int(v) for v in color.as_tuple()],
                'normalized': [round(v, 4) for v in color.normalize().as_tuple()],
                'hex': hex_value,
                'pairs': [hex_value[1:3], hex_value[3:5], hex_value[5:7]],
            },
        )
