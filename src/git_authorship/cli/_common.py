"""Shared CLI helpers."""

from typing import Optional

from rich.console import Console

from ..config import AuthorshipConfig, load_config

err_console = Console(stderr=True)


def resolve_config(
    output_format: Optional[str] = None,
    sort_mode: Optional[str] = None,
    skip_failed: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> AuthorshipConfig:
    """Build config from CLI options; unset options fall back to env/defaults."""
    overrides = {
        "output_format": output_format,
        "sort_mode": sort_mode,
        "verbose": verbose,
        "quiet": quiet,
    }
    if skip_failed:
        overrides["skip_failed_files"] = True
    return load_config(**overrides)
