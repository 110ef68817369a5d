"""Environment variable loading and settings for contrast-tool.

Load order (first wins):
  1. Existing OS environment variables, never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read afterwards:
  CONTRAST_TOOL_MIN_RATIO   default for --min-ratio (float)
  CONTRAST_TOOL_FAIL_BELOW  default for --fail-below (float)
"""

import os
from dataclasses import dataclass
from pathlib import Path

MIN_RATIO_VAR = 'CONTRAST_TOOL_MIN_RATIO'
FAIL_BELOW_VAR = 'CONTRAST_TOOL_FAIL_BELOW'


@dataclass(frozen=True)
class Settings:
    min_ratio: float | None = None
    fail_below: float | None = None


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines. Quotes around values are dropped, # lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ where the key is not already set.

    Returns the .env path used, or None.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _float_var(name: str) -> float | None:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f'{name} must be a number, got {raw!r}') from None


def load_settings() -> Settings:
    """Build Settings from the current environment (call after load_env)."""
    return Settings(min_ratio=_float_var(MIN_RATIO_VAR), fail_below=_float_var(FAIL_BELOW_VAR))
