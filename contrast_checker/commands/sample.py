"""Contrast of each colour against the background of a screenshot region.

Requires --image. Optional --bounds x1,y1,x2,y2 crops the region first
(default: whole image); it must lie inside the image. The background is
the most frequent pixel colour in the region; also reports what share of
the region it covers and the region's mean relative luminance.

Each input colour is treated as a foreground and checked against the
background with the same minimum ratio rules as 'contrast'.

Example:
    uv run contrast-tool sample '#1e293b' --image screenshot.png --bounds 0,0,280,800
"""

import numpy as np
from PIL import Image

from contrast_checker.commands.contrast import check_pair, min_ratio_for
from contrast_checker.core.color import Color
from contrast_checker.core.luminance import contrast_ratio, luminance_array
from contrast_checker.core.types import ColorInput, Command, Report

command = Command(
    name='sample',
    help='Contrast of each colour against the dominant background of an image region.',
)


def parse_bounds(text: str) -> tuple[int, int, int, int]:
    """Parse 'x1,y1,x2,y2' into a crop box."""
    parts = [p.strip() for p in text.split(',')]
    if len(parts) != 4 or not all(p.isdigit() for p in parts):
        raise ValueError(f'bounds must be x1,y1,x2,y2 integers, got {text!r}')
    x1, y1, x2, y2 = (int(p) for p in parts)
    if x2 <= x1 or y2 <= y1:
        raise ValueError(f'bounds are empty: {text!r}')
    return (x1, y1, x2, y2)


def check_bounds(bounds: tuple[int, int, int, int], size: tuple[int, int]) -> None:
    """Reject a crop box reaching past the image; PIL would pad it with black."""
    width, height = size
    if bounds[2] > width or bounds[3] > height:
        raise ValueError(f'bounds {bounds} exceed image size {width}x{height}')


def dominant_background(image: Image.Image) -> tuple[Color, float, float]:
    """Return (most frequent colour, its share in %, mean relative luminance)."""
    pixels = np.array(image.convert('RGB')).reshape(-1, 3)
    unique, counts = np.unique(pixels, axis=0, return_counts=True)
    top = int(np.argmax(counts))
    r, g, b = (int(v) for v in unique[top])
    coverage = float(counts[top]) / float(counts.sum()) * 100.0
    mean_lum = float(luminance_array(pixels).mean())
    return Color.from_channels(r, g, b), coverage, mean_lum


@command.run
def run(colors: list[ColorInput], report: Report, args) -> None:
    image_path = getattr(args, 'image', None)
    if not image_path:
        for item in colors:
            report.add(item.key, 'sample', {'error': '--image screenshot required'})
        return

    with Image.open(image_path) as img:
        image = img.convert('RGB')
    bounds_text = getattr(args, 'bounds', None)
    if bounds_text:
        bounds = parse_bounds(bounds_text)
        check_bounds(bounds, image.size)
        image = image.crop(bounds)

    background, coverage, mean_lum = dominant_background(image)
    threshold = min_ratio_for(args)
    for item in colors:
        subject = f'{item.key} on {image_path}'
        ratio = contrast_ratio(item.color, background)
        data = {
            'background': background.to_hex(),
            'coverage_pct': round(coverage, 1),
            'mean_luminance': round(mean_lum, 4),
        }
        data.update(check_pair(report, subject, ratio, threshold))
        report.add(subject, 'sample', data)
