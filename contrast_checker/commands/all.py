"""Run every command, combine into a single report.

Runs: parse, luminance, contrast.
Runs sample too if --image is provided.

Example:
    uv run contrast-tool all '#f26ca7' '#ffffff'
    uv run contrast-tool all '#f26ca7' '#ffffff' --json
    uv run contrast-tool all '#1e293b' --image screenshot.png --fail-below=4.5
"""

from contrast_checker.core.types import ColorInput, Command, Report

command = Command(
    name='all',
    help='Run parse, luminance, contrast (and sample with --image). Combine into a single report.',
)

ORDER = ['parse', 'luminance', 'contrast', 'sample']


@command.run
def run(colors: list[ColorInput], report: Report, args) -> None:
    from contrast_checker.registry import all_commands

    commands = all_commands()
    has_image = bool(getattr(args, 'image', None))
    for name in ORDER:
        if name == 'sample' and not has_image:
            continue
        # A lone colour has nothing to contrast against
        if name == 'contrast' and len(colors) < 2:
            continue
        commands[name].execute(colors, report, args)
