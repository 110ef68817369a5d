"""WCAG 2.1 contrast ratio between a foreground and one or more backgrounds.

The first colour is the foreground, every following colour a background.
For each pair reports the ratio (1 to 21), the WCAG levels it meets
(AA 4.5, AA-large 3.0, AAA 7.0, AAA-large 4.5), and pass/fail against
the minimum ratio.

Minimum ratio: --min-ratio, else CONTRAST_TOOL_MIN_RATIO, else AA
(4.5, or 3.0 with --large-text).

Example:
    uv run contrast-tool contrast 242,108,167 '#ffffff' '#000000'
    uv run contrast-tool contrast '#767676' '#ffffff' --large-text
"""

from contrast_checker.core.luminance import WCAG_AA_LARGE, WCAG_AA_NORMAL, contrast_ratio, wcag_levels
from contrast_checker.core.types import ColorInput, Command, Report

command = Command(
    name='contrast',
    help='Contrast ratio of the first colour against each other colour. Pass/fail per pair.',
)


def min_ratio_for(args) -> float:
    """Threshold a pair must meet, from args or the WCAG AA default."""
    explicit = getattr(args, 'min_ratio', None)
    if explicit is not None:
        return explicit
    return WCAG_AA_LARGE if getattr(args, 'large_text', False) else WCAG_AA_NORMAL


def check_pair(report: Report, subject: str, ratio: float, threshold: float) -> dict:
    """Record a ratio against threshold and return the result fields."""
    passed = ratio >= threshold
    report.record_ratio(subject, ratio)
    if passed:
        report.record_pass(subject)
    else:
        report.record_fail(subject)
    return {
        'ratio': round(ratio, 4),
        'min_ratio': threshold,
        'levels': wcag_levels(ratio),
        'pass': passed,
    }


@command.run
def run(colors: list[ColorInput], report: Report, args) -> None:
    if len(colors) < 2:
        for item in colors:
            report.add(item.key, 'contrast', {'error': 'need a foreground and at least one background'})
        return

    threshold = min_ratio_for(args)
    foreground, backgrounds = colors[0], colors[1:]
    for bg in backgrounds:
        subject = f'{foreground.key} on {bg.key}'
        ratio = contrast_ratio(foreground.color, bg.color)
        report.add(subject, 'contrast', check_pair(report, subject, ratio, threshold))
