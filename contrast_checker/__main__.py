"""contrast-tool: WCAG 2.1 relative luminance and contrast ratios for sRGB colours.

Usage: uv run contrast-tool <command> <colour> [<colour> ...] [options]

Colours are '#RRGGBB' / 'RRGGBB' hex (case-insensitive) or 'r,g,b' decimal triples.
Commands are auto-discovered from contrast_checker/commands/.
Each command module's docstring is its documentation.
Run `contrast-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, contrast-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

from contrast_checker import registry
from contrast_checker.core.color import ChannelRangeError, ColorParseError, parse_color
from contrast_checker.core.env import load_env, load_settings
from contrast_checker.core.report import format_json, format_text
from contrast_checker.core.types import ColorInput, Report, label_inputs


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'contrast_checker.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  contrast-tool parse '#F26CA7' 242,108,167\n"
        "  contrast-tool luminance '#ffffff'\n"
        "  contrast-tool contrast 242,108,167 '#ffffff' '#000000'\n"
        "  contrast-tool contrast '#767676' '#ffffff' --large-text --json\n"
        "  contrast-tool all '#1e293b' '#f8fafc' --fail-below=7\n"
        "  contrast-tool sample '#1e293b' --image screenshot.png --bounds 0,0,280,800\n"
        '  contrast-tool help contrast\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  CONTRAST_TOOL_MIN_RATIO   default for --min-ratio\n'
        '  CONTRAST_TOOL_FAIL_BELOW  default for --fail-below\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrast-tool',
        description='WCAG 2.1 relative luminance and contrast ratios for sRGB colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('colours', nargs='+', metavar='COLOUR', help="'#RRGGBB', 'RRGGBB' or 'r,g,b'")
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-m',
            '--min-ratio',
            type=float,
            default=None,
            metavar='N',
            help='Minimum contrast ratio for a pair to pass (default: WCAG AA)',
        )
        p.add_argument('-l', '--large-text', action='store_true', help='Use large-text AA threshold (3.0)')
        p.add_argument('-i', '--image', help='Screenshot PNG/JPG for the sample command')
        p.add_argument('-b', '--bounds', metavar='X1,Y1,X2,Y2', help='Region of --image to sample')
        p.add_argument(
            '-f',
            '--fail-below',
            type=float,
            default=None,
            metavar='N',
            help='Exit 1 if any contrast ratio is below N (CI gating)',
        )

    # `help` subcommand, prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: contrast-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _check_fail_below(report: Report, threshold: float) -> bool:
    """Return True if any recorded contrast ratio is below threshold."""
    failures = [(subject, ratio) for subject, ratio in report.ratios.items() if ratio < threshold]
    if failures:
        # stdout carries only the report
        print(f'\nFAIL: {len(failures)} pair(s) below contrast ratio {threshold}:', file=sys.stderr)
        for subject, ratio in failures:
            print(f'  {subject}: {ratio:.2f}:1', file=sys.stderr)
        return True
    return False


def _parse_colours(texts: list[str]) -> list[ColorInput]:
    """Parse and label every colour argument, exiting with a message on the first bad one."""
    colors = []
    for text in texts:
        try:
            colors.append(ColorInput(text=text, color=parse_color(text)))
        except (ColorParseError, ChannelRangeError) as e:
            print(f'Error: invalid colour {text!r}: {e}', file=sys.stderr)
            sys.exit(1)
    return label_inputs(colors)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else, OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'contrast-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    try:
        settings = load_settings()
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    if args.min_ratio is None:
        args.min_ratio = settings.min_ratio
    if args.fail_below is None:
        args.fail_below = settings.fail_below

    if args.image and not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        sys.exit(1)

    colors = _parse_colours(args.colours)
    report = Report(inputs=[c.text for c in colors])

    cmd = registry.get(args.command)
    try:
        cmd.execute(colors, report, args)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate, must happen after output so report is visible even on failure
    if args.fail_below is not None and _check_fail_below(report, args.fail_below):
        sys.exit(1)


if __name__ == '__main__':
    main()
