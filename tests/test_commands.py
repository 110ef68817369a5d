"""Tests for command discovery, each command, and the report formatters."""

import json
from pathlib import Path

import pytest
from contrast_checker.commands.sample import check_bounds, dominant_background, parse_bounds
from contrast_checker.core.color import Color, parse_color
from contrast_checker.core.report import format_json, format_text
from contrast_checker.core.types import ColorInput, Command, Report, label_inputs
from contrast_checker.registry import discover, get
from PIL import Image


def _inputs(*texts: str) -> list[ColorInput]:
    return label_inputs([ColorInput(text=t, color=parse_color(t)) for t in texts])


class Args:
    json = False
    min_ratio = None
    large_text = False
    image = None
    bounds = None
    fail_below = None


@pytest.fixture
def screenshot(tmp_path: Path) -> Path:
    """10x10 white image with a 2x2 black square in the top-left corner."""
    img = Image.new('RGB', (10, 10), (255, 255, 255))
    for x in range(2):
        for y in range(2):
            img.putpixel((x, y), (0, 0, 0))
    path = tmp_path / 'shot.png'
    img.save(path)
    return path


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(discover()) == {'all', 'contrast', 'luminance', 'parse', 'sample'}

    def test_get_unknown(self):
        with pytest.raises(KeyError, match='Available'):
            get('nope')

    def test_command_without_run_fn(self):
        with pytest.raises(RuntimeError):
            Command(name='empty').execute([], Report(), Args())


class TestParseCommand:
    def test_reports_channels_and_hex(self):
        report = Report()
        get('parse').execute(_inputs('#F26CA7'), report, Args())
        data = report.subjects['#F26CA7']['parse']
        assert data['rgb'] == [242, 108, 167]
        assert data['hex'] == '#f26ca7'
        assert data['pairs'] == ['f2', '6c', 'a7']
        assert data['normalized'][0] == pytest.approx(242 / 255, abs=1e-4)


class TestLuminanceCommand:
    def test_per_colour(self):
        report = Report()
        get('luminance').execute(_inputs('#ffffff', '0,0,0'), report, Args())
        assert report.subjects['#ffffff']['luminance']['luminance'] == pytest.approx(1.0)
        assert report.subjects['0,0,0']['luminance']['luminance'] == 0.0


class TestContrastCommand:
    def test_pairs_against_first_colour(self):
        report = Report()
        get('contrast').execute(_inputs('#000000', '#ffffff', '#000000'), report, Args())
        white = report.subjects['#000000 [1] on #ffffff']['contrast']
        black = report.subjects['#000000 [1] on #000000 [3]']['contrast']
        assert white['ratio'] == pytest.approx(21.0)
        assert white['pass'] is True
        assert white['levels']['AAA'] is True
        assert black['ratio'] == pytest.approx(1.0)
        assert black['pass'] is False
        assert (report.pass_count, report.fail_count) == (1, 1)
        assert len(report.ratios) == 2

    def test_default_min_ratio_is_aa(self):
        report = Report()
        get('contrast').execute(_inputs('#777777', '#ffffff'), report, Args())
        data = report.subjects['#777777 on #ffffff']['contrast']
        assert data['min_ratio'] == 4.5
        assert data['pass'] is False

    def test_large_text_threshold(self):
        class LargeArgs(Args):
            large_text = True

        report = Report()
        get('contrast').execute(_inputs('#777777', '#ffffff'), report, LargeArgs())
        data = report.subjects['#777777 on #ffffff']['contrast']
        assert data['min_ratio'] == 3.0
        assert data['pass'] is True

    def test_explicit_min_ratio_wins(self):
        class StrictArgs(Args):
            large_text = True
            min_ratio = 7.0

        report = Report()
        get('contrast').execute(_inputs('#777777', '#ffffff'), report, StrictArgs())
        assert report.subjects['#777777 on #ffffff']['contrast']['min_ratio'] == 7.0

    def test_single_colour_is_an_error(self):
        report = Report()
        get('contrast').execute(_inputs('#ffffff'), report, Args())
        assert 'error' in report.subjects['#ffffff']['contrast']
        assert report.ratios == {}

    def test_repeated_background_keeps_both_pairs(self):
        report = Report()
        get('contrast').execute(_inputs('#777777', '#ffffff', '#ffffff'), report, Args())
        assert set(report.subjects) == {'#777777 on #ffffff [2]', '#777777 on #ffffff [3]'}
        parsed = json.loads(format_json(report))
        assert len(parsed['subjects']) == 2
        assert parsed['summary']['total'] == 2
        assert parsed['summary']['failed'] == ['#777777 on #ffffff [2]', '#777777 on #ffffff [3]']

    def test_records_failed_subjects(self):
        report = Report()
        get('contrast').execute(_inputs('#000000', '#ffffff', '#111111'), report, Args())
        assert report.passed == ['#000000 on #ffffff']
        assert report.failed == ['#000000 on #111111']
        assert report.ratios['#000000 on #ffffff'] == pytest.approx(21.0)


class TestSampleCommand:
    def test_parse_bounds(self):
        assert parse_bounds('0, 0, 280, 800') == (0, 0, 280, 800)

    @pytest.mark.parametrize('text', ['1,2,3', 'a,b,c,d', '5,5,5,10', '-1,0,2,2'])
    def test_bad_bounds(self, text):
        with pytest.raises(ValueError):
            parse_bounds(text)

    def test_dominant_background(self, screenshot: Path):
        colour, coverage, mean_lum = dominant_background(Image.open(screenshot))
        assert colour == Color.from_channels(255, 255, 255)
        assert coverage == pytest.approx(96.0)
        assert mean_lum == pytest.approx(0.96)

    def test_whole_image(self, screenshot: Path):
        class ImageArgs(Args):
            image = str(screenshot)

        report = Report()
        get('sample').execute(_inputs('#000000'), report, ImageArgs())
        data = report.subjects[f'#000000 on {screenshot}']['sample']
        assert data['background'] == '#ffffff'
        assert data['ratio'] == pytest.approx(21.0)
        assert data['pass'] is True

    def test_bounds_crop(self, screenshot: Path):
        class RegionArgs(Args):
            image = str(screenshot)
            bounds = '0,0,2,2'

        report = Report()
        get('sample').execute(_inputs('#000000'), report, RegionArgs())
        data = report.subjects[f'#000000 on {screenshot}']['sample']
        assert data['background'] == '#000000'
        assert data['coverage_pct'] == 100.0
        assert data['pass'] is False

    def test_requires_image(self):
        report = Report()
        get('sample').execute(_inputs('#000000'), report, Args())
        assert 'error' in report.subjects['#000000']['sample']

    def test_bounds_outside_image_rejected(self, screenshot: Path):
        class WideArgs(Args):
            image = str(screenshot)
            bounds = '0,0,100,100'

        report = Report()
        with pytest.raises(ValueError, match='exceed image size 10x10'):
            get('sample').execute(_inputs('#000000'), report, WideArgs())
        assert report.subjects == {}

    def test_check_bounds_edges(self):
        check_bounds((0, 0, 10, 10), (10, 10))
        with pytest.raises(ValueError):
            check_bounds((0, 0, 10, 11), (10, 10))
        with pytest.raises(ValueError):
            check_bounds((0, 0, 11, 10), (10, 10))


class TestAllCommand:
    def test_runs_parse_luminance_contrast(self):
        report = Report()
        get('all').execute(_inputs('#f26ca7', '#ffffff'), report, Args())
        assert 'parse' in report.subjects['#f26ca7']
        assert 'luminance' in report.subjects['#ffffff']
        assert 'contrast' in report.subjects['#f26ca7 on #ffffff']

    def test_single_colour_skips_contrast(self):
        report = Report()
        get('all').execute(_inputs('#f26ca7'), report, Args())
        assert set(report.subjects) == {'#f26ca7'}
        assert 'contrast' not in report.subjects['#f26ca7']

    def test_sample_with_image(self, screenshot: Path):
        class ImageArgs(Args):
            image = str(screenshot)

        report = Report()
        get('all').execute(_inputs('#000000'), report, ImageArgs())
        assert 'sample' in report.subjects[f'#000000 on {screenshot}']


class TestReportFormat:
    def _report(self) -> Report:
        report = Report(inputs=['#000000', '#ffffff'])
        get('all').execute(_inputs('#000000', '#ffffff'), report, Args())
        return report

    def test_text(self):
        text = format_text(self._report())
        assert text.startswith('contrast-tool: 2 colour(s)')
        assert 'hex: #000000' in text
        assert 'ratio: 21.00:1' in text
        assert 'PASS 1/1 pairs  FAIL 0/1 pairs' in text

    def test_text_error_entry(self):
        report = Report(inputs=['#ffffff'])
        get('contrast').execute(_inputs('#ffffff'), report, Args())
        assert 'contrast: error:' in format_text(report)

    def test_json(self):
        parsed = json.loads(format_json(self._report()))
        assert parsed['inputs'] == ['#000000', '#ffffff']
        assert parsed['summary'] == {'total': 1, 'pass': 1, 'fail': 0, 'failed': []}
        names = [s['name'] for s in parsed['subjects']]
        assert '#000000 on #ffffff' in names


class TestLabelInputs:
    def test_unique_texts_kept(self):
        assert [c.key for c in _inputs('#000000', '#ffffff')] == ['#000000', '#ffffff']

    def test_repeated_texts_get_position(self):
        keys = [c.key for c in _inputs('#ffffff', '#000000', '#ffffff')]
        assert keys == ['#ffffff [1]', '#000000', '#ffffff [3]']

    def test_unlabelled_input_falls_back_to_text(self):
        item = ColorInput(text='#ffffff', color=parse_color('#ffffff'))
        assert item.key == '#ffffff'

    def test_repeated_luminance_inputs_both_reported(self):
        report = Report()
        get('luminance').execute(_inputs('#ffffff', '#ffffff'), report, Args())
        assert set(report.subjects) == {'#ffffff [1]', '#ffffff [2]'}
