"""sRGB relative luminance and WCAG 2.1 contrast ratio.

Transfer curve and primaries weights: https://en.wikipedia.org/wiki/SRGB
Relative luminance: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
Contrast ratio: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""

from __future__ import annotations

import numpy as np

from contrast_checker.core.color import Color

SRGB_THRESHOLD = 0.04045
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722

# Flare term added to both luminances in the contrast ratio
LUMINANCE_OFFSET = 0.05

WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0
WCAG_AAA_NORMAL = 7.0
WCAG_AAA_LARGE = 4.5


def linearize(c: float) -> float:
    """Convert one normalised (0-1) sRGB channel to linear light."""
    if c <= SRGB_THRESHOLD:
        return c / SRGB_LINEAR_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def luminance(color: Color) -> float:
    """Relative luminance of a 0..255 colour. 0.0 for black, 1.0 for white.

    Out-of-range channels are not rejected here; they give an out-of-range result.
    """
    n = color.normalize()
    return RED_WEIGHT * linearize(n.red) + GREEN_WEIGHT * linearize(n.green) + BLUE_WEIGHT * linearize(n.blue)


def contrast_ratio(a: Color, b: Color) -> float:
    """WCAG contrast ratio in [1, 21]. Argument order does not matter."""
    la = luminance(a)
    lb = luminance(b)
    lighter = max(la, lb)
    darker = min(la, lb)
    return (lighter + LUMINANCE_OFFSET) / (darker + LUMINANCE_OFFSET)


def wcag_levels(ratio: float) -> dict[str, bool]:
    """Which WCAG 2.1 text contrast levels a ratio meets (SC 1.4.3 and 1.4.6)."""
    return {
        'AA': ratio >= WCAG_AA_NORMAL,
        'AA-large': ratio >= WCAG_AA_LARGE,
        'AAA': ratio >= WCAG_AAA_NORMAL,
        'AAA-large': ratio >= WCAG_AAA_LARGE,
    }


def luminance_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorised relative luminance for an array of shape (..., 3) in 0..255."""
    arr = np.asarray(rgb, dtype=np.float64) / 255.0
    linear = np.where(
        arr <= SRGB_THRESHOLD,
        arr / SRGB_LINEAR_SLOPE,
        ((arr + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )
    return linear @ np.array([RED_WEIGHT, GREEN_WEIGHT, BLUE_WEIGHT])
