from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from gts.core.config import TaggingConfig, load_config_or_default
from gts.core.errors import ErrorCode
from gts.core.result import Err
from gts.git.backend import GitBackend, GitCli
from gts.output.console import ConsoleProtocol, RichConsole
from gts.platform.actions import github_remote_url


@dataclass(frozen=True, slots=True)
class CLIContext:
    backend: GitBackend
    config: TaggingConfig
    console: ConsoleProtocol


def resolve_config(
    base: TaggingConfig,
    *,
    remote: str | None = None,
    ref: str | None = None,
    checkout_ref: str | None = None,
    dry_run: bool = False,
    verbose: bool = False,
    github_token: str | None = None,
    github_repository: str | None = None,
) -> TaggingConfig:
    """Layer CLI values over ``base``.

    Without an explicit ``remote``, a known token and repository turn the
    remote into an authenticated GitHub URL.
    """
    config = base.with_overrides(
        remote=remote,
        ref=ref,
        checkout_ref=checkout_ref,
        dry_run=dry_run or None,
        verbose=verbose or None,
        github_token=github_token,
        github_repository=github_repository,
    )
    if remote is None and config.github_token and config.github_repository:
        config = config.with_overrides(
            remote=github_remote_url(config.github_token, config.github_repository)
        )
    return config


def build_context(
    *,
    repo: Path,
    config_path: Path | None,
    **overrides: object,
) -> CLIContext:
    config_result = load_config_or_default(config_path)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config = resolve_config(config_result.value, **overrides)  # type: ignore[arg-type]

    backend = GitCli(repo)
    if not backend.exists():
        typer.echo(f"error: not a git repository root: {repo}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        backend=backend,
        config=config,
        console=RichConsole(verbose=config.verbose),
    )
