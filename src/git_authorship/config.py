"""Configuration loading for git-authorship.

Configuration sources are merged in priority order:
    1. Defaults (defined in AuthorshipConfig)
    2. Environment variables (GIT_AUTHORSHIP_* prefix)
    3. CLI overrides (passed as kwargs)

The tool reads no configuration files.

Example:
    >>> config = load_config(sort_mode="exact", verbose=True)
    >>> config.sort_mode
    'exact'
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Any, Literal, Optional, get_args, get_type_hints

from .exceptions import InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
SortMode = Literal["truncated", "exact"]
OutputFormat = Literal["text", "rich", "json", "csv"]

ENV_PREFIX = "GIT_AUTHORSHIP_"


@dataclass(frozen=True)
class AuthorshipConfig:
    """Settings for one attribution run.

    Attributes:
        Git invocation:
            git_executable: Name or path of the git binary
            git_timeout: Seconds before a single git command is abandoned
                (None waits forever)
            encoding: Codec used to decode git output

        Aggregation:
            sort_mode: "truncated" orders by integer percent (ties by name),
                "exact" orders by line count (ties by name)
            skip_failed_files: Warn and continue when blaming one file fails
                instead of aborting the run

        Output control:
            output_format: One of text, rich, json, csv
            verbosity: Logging verbosity level
    """

    # Git invocation
    git_executable: str = "git"
    git_timeout: Optional[float] = None
    encoding: str = "utf-8"

    # Aggregation
    sort_mode: SortMode = "truncated"
    skip_failed_files: bool = False

    # Output control
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.git_executable:
            raise InvalidConfigError("git_executable", self.git_executable, "must not be empty")
        if self.git_timeout is not None and self.git_timeout <= 0:
            raise InvalidConfigError("git_timeout", self.git_timeout, "must be positive")

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown codec")

        for key, alias in (
            ("sort_mode", SortMode),
            ("output_format", OutputFormat),
            ("verbosity", Verbosity),
        ):
            value = getattr(self, key)
            allowed = get_args(alias)
            if value not in allowed:
                raise InvalidConfigError(key, value, f"expected one of {', '.join(allowed)}")


def load_config(**overrides: Any) -> AuthorshipConfig:
    """Build a validated configuration from defaults, environment and overrides.

    Args:
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated AuthorshipConfig instance

    Raises:
        InvalidConfigError: If a value is malformed or an unknown key is given
    """
    merged: dict[str, Any] = {}
    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(AuthorshipConfig.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration key")

    return AuthorshipConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GIT_AUTHORSHIP_* environment variables.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(AuthorshipConfig)

    result: dict[str, Any] = {}

    for field_name in AuthorshipConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Optional[X] is Union[X, None]; unwrap to X
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
        if value.strip().lower() in ("", "none"):
            return None

    origin = getattr(type_hint, "__origin__", None)

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # Literal choices match case-insensitively, like the CLI options
    if origin is Literal:
        return value.strip().lower()

    if type_hint is str:
        return value

    return None


default_config = AuthorshipConfig()
