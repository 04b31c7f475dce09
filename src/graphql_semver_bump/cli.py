"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from graphql_semver_bump.configuration import ConfigurationError, load_configuration
from graphql_semver_bump.results_writing import render_run_report
from graphql_semver_bump.revision_store import GitRevisionStore
from graphql_semver_bump.run_execution import (
    ExitStatus,
    RunExecutionError,
    RunRequest,
    execute_semver_check,
)

USAGE = (
    "Wrong number of arguments. Usage:\n"
    "\tgraphql-semver-bump [main] [some-branch] [schema.graphql] [schema.ver]"
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-semver-bump")
@click.option(
    "--config",
    "config_path",
    required=False,
    default=None,
    type=click.Path(path_type=str),
    help="Optional YAML settings file (git, schema and report sections)",
)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Verbosity of diagnostics written to stderr",
)
@click.argument("arguments", nargs=-1, metavar="BASE_REF HEAD_REF SCHEMA_FILE SEMVER_FILE")
@click.pass_context
def cli(
    ctx: click.Context, config_path: str | None, log_level: str, arguments: tuple[str, ...]
) -> None:
    """Check that SEMVER_FILE at HEAD_REF reflects the GraphQL schema change since BASE_REF."""
    if len(arguments) != 4:
        click.echo(USAGE)
        ctx.exit(int(ExitStatus.WRONG_ARGUMENTS))

    _configure_logging(log_level)
    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        click.echo(str(exc), err=True)
        ctx.exit(int(ExitStatus.INVALID_CONFIGURATION))

    base_ref, head_ref, schema_file, semver_file = arguments
    request = RunRequest(
        base_ref=base_ref,
        head_ref=head_ref,
        schema_file=schema_file,
        semver_file=semver_file,
    )
    store = GitRevisionStore(
        executable=configuration.git.executable,
        working_directory=configuration.git.working_directory,
        encoding=configuration.schema.encoding,
    )
    try:
        outcome = execute_semver_check(request, reader=store, probe=store)
    except RunExecutionError as exc:
        click.echo(str(exc), err=True)
        for detail in exc.details:
            click.echo(f"  {detail}", err=True)
        ctx.exit(int(exc.exit_status))

    for line in render_run_report(
        request, outcome, list_declarations=configuration.report.list_declarations
    ):
        click.echo(line)
    ctx.exit(int(outcome.exit_status))


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(format="%(levelname)s: %(message)s", stream=sys.stderr)
    logging.getLogger("graphql_semver_bump").setLevel(level_name.upper())


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except click.UsageError as exc:
        exc.show()
        return int(ExitStatus.WRONG_ARGUMENTS)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return int(exit_code or 0)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
