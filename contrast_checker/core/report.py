"""Report builder: text and JSON output for contrast-tool results."""

import json
from typing import Any

from contrast_checker.core.types import Report


def _levels(levels: dict[str, bool]) -> str:
    return '  '.join(f'{name} {"✓" if ok else "✗"}' for name, ok in levels.items())


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'contrast-tool: {len(report.inputs)} colour(s)', '']

    for subject, commands in report.subjects.items():
        lines.append(f'── {subject}')
        for name, data in commands.items():
            if 'error' in data:
                lines.append(f'  {name}: error: {data["error"]}')
            elif name == 'parse':
                lines.append(f'  rgb: {data["rgb"]}  hex: {data["hex"]}')
                lines.append(f'  normalized: {data["normalized"]}')
            elif name == 'luminance':
                lines.append(f'  luminance: {data["luminance"]:.4f}')
            elif name in ('contrast', 'sample'):
                if name == 'sample':
                    lines.append(
                        f'  background: {data["background"]} ({data["coverage_pct"]}% of region)'
                        f'  mean luminance: {data["mean_luminance"]:.4f}'
                    )
                mark = '✓' if data['pass'] else '✗'
                lines.append(f'  ratio: {data["ratio"]:.2f}:1  min {data["min_ratio"]}  {mark}')
                lines.append(f'  {_levels(data["levels"])}')
            else:
                # Generic fallback
                for k, v in data.items():
                    lines.append(f'  {name}.{k}: {v}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} pairs  FAIL {report.fail_count}/{total} pairs')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'inputs': report.inputs}
    obj['subjects'] = [{'name': name, 'commands': commands} for name, commands in report.subjects.items()]
    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
        'failed': report.failed,
    }
    return json.dumps(obj, indent=2)
