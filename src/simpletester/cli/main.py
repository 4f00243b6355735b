"""CLI entry point for simpletester."""
from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from simpletester import __version__, bootstrap
from simpletester.config import REPORT_FORMATS, RunConfig, load_config
from simpletester.session import run_session


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"simpletester {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the simpletester version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for simpletester."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.argument("tests", required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML run configuration file.",
)
@click.option("--filter", "name_filter", type=str, help="Only run tests whose name matches this pattern.")
@click.option("--scheduler", type=str, help="Scheduler used between tests (asyncio by default).")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(REPORT_FORMATS),
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.option("--list", "list_only", is_flag=True, help="List matched tests without running.")
@click.pass_obj
def run(
    state: CliState,
    tests: Optional[str],
    config_path: Optional[str],
    name_filter: Optional[str],
    scheduler: Optional[str],
    report_format: Optional[str],
    report_path: Optional[str],
    no_color: bool,
    list_only: bool,
) -> None:
    """Run the tests in TESTS, a 'module:attr' mapping of name to test function."""

    try:
        config = load_config(config_path) if config_path else RunConfig()
        config = config.merged(
            tests=tests,
            filter=name_filter,
            scheduler=scheduler,
            report=report_format,
            report_path=report_path,
            color=False if no_color else None,
        )
        exit_code = run_session(config, list_only=list_only)
    except Exception as exc:
        if state.verbose:
            logging.getLogger(__name__).exception("run failed")
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="simpletester", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
