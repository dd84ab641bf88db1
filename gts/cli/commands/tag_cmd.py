from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer

from gts.cli.context import CLIContext, build_context
from gts.core.errors import ErrorCode
from gts.core.result import Err
from gts.output.console import Style
from gts.output.errors import print_tag_error, tag_error_exit_code
from gts.platform.actions import write_outputs
from gts.services.tagging import (
    RELEASE_TYPES,
    TagError,
    TagHandler,
    TagResolver,
    parse_release_type,
)


def _fail(ctx: CLIContext, error: TagError) -> NoReturn:
    print_tag_error(error, ctx.console, secret=ctx.config.github_token)
    raise typer.Exit(code=tag_error_exit_code(error))


def tag(
    release_type: str | None = typer.Argument(
        None,
        envvar="INPUT_VERSION",
        help=f"Release type: {', '.join(RELEASE_TYPES)}.",
        show_default=False,
    ),
    remote: str | None = typer.Option(
        None, "--remote", envvar="GTS_REMOTE", help="Remote name or URL (default: origin)."
    ),
    ref: str | None = typer.Option(None, "--ref", help="Commit the tags point at (default: HEAD)."),
    checkout: str | None = typer.Option(
        None, "--checkout", help="Ref to check out before tagging."
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        envvar=["GTS_DRY_RUN", "INPUT_DRY-RUN"],
        help="Compute the tags without creating or pushing them.",
    ),
    config_path: Path | None = typer.Option(
        None, "--config", envvar="GTS_CONFIG", help="TOML file with a [tagging] table."
    ),
    github_token: str | None = typer.Option(
        None, "--github-token", envvar="GITHUB_TOKEN", help="Token for an authenticated push URL."
    ),
    repository: str | None = typer.Option(
        None, "--repository", envvar="GITHUB_REPOSITORY", help="GitHub repository (owner/name)."
    ),
    output_file: Path | None = typer.Option(
        None, "--output-file", envvar="GITHUB_OUTPUT", help="File receiving runner outputs."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", envvar="RUNNER_DEBUG"),
    repo: Path = typer.Option(Path("."), "--repo", help="Repository root."),
) -> None:
    """Compute the next version tags and force-publish them."""
    ctx = build_context(
        repo=repo,
        config_path=config_path,
        remote=remote,
        ref=ref,
        checkout_ref=checkout,
        dry_run=dry_run,
        verbose=verbose,
        github_token=github_token,
        github_repository=repository,
    )

    parsed = parse_release_type(release_type or "")
    if isinstance(parsed, Err):
        _fail(ctx, parsed.error)

    handler = TagHandler(backend=ctx.backend, config=ctx.config, console=ctx.console)
    result = handler.run(parsed.value)
    if isinstance(result, Err):
        _fail(ctx, result.error)

    run = result.value
    if run.published:
        ctx.console.success(f"published tags: {', '.join(run.tags)}")
    else:
        ctx.console.print(f"tags: {', '.join(run.tags)}", Style.DIM)

    if output_file is not None:
        written = write_outputs(run.to_outputs(), output_file)
        if isinstance(written, Err):
            ctx.console.error(written.error.message)
            raise typer.Exit(code=int(ErrorCode.IO_ERROR))
        ctx.console.debug(f"outputs written to {output_file}")

    typer.echo(json.dumps(run.tags.as_list()))


def latest(
    remote: str | None = typer.Option(
        None, "--remote", envvar="GTS_REMOTE", help="Remote name or URL (default: origin)."
    ),
    config_path: Path | None = typer.Option(
        None, "--config", envvar="GTS_CONFIG", help="TOML file with a [tagging] table."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", envvar="RUNNER_DEBUG"),
    repo: Path = typer.Option(Path("."), "--repo", help="Repository root."),
) -> None:
    """Print the latest released version found on the remote."""
    ctx = build_context(repo=repo, config_path=config_path, remote=remote, verbose=verbose)

    resolver = TagResolver(
        ctx.backend,
        remote=ctx.config.remote,
        pattern=ctx.config.tag_pattern,
        console=ctx.console,
    )
    version = resolver.resolve_latest_version()
    if isinstance(version, Err):
        _fail(ctx, version.error)

    typer.echo(str(version.value))
