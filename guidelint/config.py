"""
config.py — Lint configuration for guidelint.

Provides:
  LintConfig    — validated settings (pydantic v2 model)
  load_config() — layer defaults, pyproject.toml, environment and CLI overrides

Precedence (lowest first):
  1. LintConfig defaults
  2. [tool.guidelint] in pyproject.toml (explicit --config path, or the
     nearest pyproject.toml found walking up from the start directory)
  3. GUIDELINT_<FIELD> environment variables (a .env file in the start
     directory is loaded first; real environment variables win over it)
  4. Command-line overrides

Usage:
    from guidelint.config import load_config

    config = load_config(overrides={'max_line_length': 120})
"""

import logging
import os
import tomllib
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from guidelint.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = 'GUIDELINT_'

DEFAULT_EXCLUDE = [
    '.git', '.hg', '.svn', '.tox', '.nox', '.venv', 'venv', 'env',
    '__pycache__', 'build', 'dist', '*.egg-info', 'node_modules',
    '.mypy_cache', '.pytest_cache',
]

# Names exempt from N001: unittest hooks and ast.NodeVisitor methods (fnmatch patterns)
DEFAULT_NAMING_IGNORE = [
    'setUp', 'tearDown', 'setUpClass', 'tearDownClass',
    'setUpModule', 'tearDownModule', 'visit_*',
]


# ── Shared validator helpers ──────────────────────────────────────────────────

def _split_list(v) -> list[str]:
    """Accept 'a, b,c' or ['a', 'b'] and return a clean list of strings."""
    if v is None:
        return []
    if isinstance(v, str):
        v = v.split(',')
    return [str(item).strip() for item in v if str(item).strip()]


# ── Settings model ────────────────────────────────────────────────────────────

class LintConfig(BaseModel):
    model_config = ConfigDict(extra='forbid')

    max_line_length:        int                         = Field(default=100, ge=20, le=500)
    quote_style:            Literal['single', 'double'] = 'single'
    select:                 list[str] = Field(default_factory=list)
    ignore:                 list[str] = Field(default_factory=list)
    exclude:                list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    extend_exclude:         list[str] = Field(default_factory=list)
    local_packages:         list[str] = Field(default_factory=list)
    naming_ignore:          list[str] = Field(default_factory=lambda: list(DEFAULT_NAMING_IGNORE))
    allow_relative_imports: bool      = False
    ignore_long_urls:       bool      = True
    output_format:          Literal['text', 'json']     = 'text'

    @field_validator('select', 'ignore', mode='before')
    @classmethod
    def normalise_codes(cls, v) -> list[str]:
        return [code.upper() for code in _split_list(v)]

    @field_validator('exclude', 'extend_exclude', 'local_packages', 'naming_ignore',
                     mode='before')
    @classmethod
    def split_names(cls, v) -> list[str]:
        return _split_list(v)

    @field_validator('quote_style', 'output_format', mode='before')
    @classmethod
    def lower_choice(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    # ── Derived views ─────────────────────────────────────────────────────────

    @property
    def exclude_patterns(self) -> list[str]:
        return self.exclude + self.extend_exclude

    def is_enabled(self, code: str) -> bool:
        """
        Decide whether a rule code is reported.

        select/ignore entries are prefixes ('N' matches every naming rule).
        When both lists match, the longer (more specific) prefix wins; a tie
        goes to ignore.
        """
        selected = _longest_prefix(code, self.select) if self.select else 0
        if self.select and not selected:
            return False
        ignored = _longest_prefix(code, self.ignore)
        if not ignored:
            return True
        return selected > ignored


def _longest_prefix(code: str, prefixes: list[str]) -> int:
    return max((len(p) for p in prefixes if code.startswith(p)), default=0)


# ── Loading ───────────────────────────────────────────────────────────────────

def find_pyproject(start_dir: str = '.') -> str | None:
    """Return the nearest pyproject.toml at or above start_dir, or None."""
    current = os.path.abspath(start_dir)
    while True:
        candidate = os.path.join(current, 'pyproject.toml')
        if os.path.isfile(candidate):
            return candidate
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def read_pyproject(path: str) -> dict:
    """Return the [tool.guidelint] table of a pyproject.toml (dashes → underscores)."""
    try:
        with open(path, 'rb') as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f'cannot read file ({exc.strerror})', source=path) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f'invalid TOML ({exc})', source=path) from exc

    table = data.get('tool', {}).get('guidelint', {})
    if not isinstance(table, dict):
        raise ConfigError('[tool.guidelint] must be a table', source=path)
    return {key.replace('-', '_'): value for key, value in table.items()}


def load_env_file(start_dir: str = '.'):
    """Load <start_dir>/.env into os.environ without replacing variables already set."""
    load_dotenv(os.path.join(start_dir, '.env'), override=False)


def read_environment(start_dir: str = '.') -> dict:
    """Collect GUIDELINT_<FIELD> variables for every LintConfig field."""
    load_env_file(start_dir)
    values = {}
    for field in LintConfig.model_fields:
        raw = os.getenv(ENV_PREFIX + field.upper())
        if raw is not None:
            values[field] = raw
    return values


def load_config(
    config_path: str | None = None,
    overrides: dict | None = None,
    start_dir: str = '.',
) -> LintConfig:
    """Build a LintConfig from every configuration layer."""
    values:  dict = {}
    origins: dict[str, str] = {}

    pyproject = config_path or find_pyproject(start_dir)
    if pyproject:
        table = read_pyproject(pyproject)
        values.update(table)
        origins.update(dict.fromkeys(table, pyproject))
        logger.debug('Loaded [tool.guidelint] from %s', pyproject)

    env_values = read_environment(start_dir)
    if env_values:
        logger.debug('Environment overrides: %s', ', '.join(sorted(env_values)))
        values.update(env_values)
        origins.update({key: ENV_PREFIX + key.upper() for key in env_values})

    cli_values = {k: v for k, v in (overrides or {}).items() if v is not None}
    values.update(cli_values)
    origins.update(dict.fromkeys(cli_values, 'command line'))

    try:
        return LintConfig(**values)
    except ValidationError as exc:
        problems: dict[str, list[str]] = {}
        for err in exc.errors():
            field = str(err['loc'][0]) if err['loc'] else ''
            location = '.'.join(str(p) for p in err['loc'])
            problems.setdefault(origins.get(field, 'defaults'), []).append(
                f"{location}: {err['msg']}",
            )
        if len(problems) == 1:
            source, messages = next(iter(problems.items()))
            raise ConfigError('; '.join(messages), source=source) from exc
        message = '; '.join(f"{source}: {'; '.join(msgs)}" for source, msgs in problems.items())
        raise ConfigError(message) from exc
