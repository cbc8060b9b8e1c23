"""Command-line entry point for ``kickoff``.

``kickoff`` personalizes a freshly cloned backend template: it asks for the
project name, description, and author, rewrites ``package.json`` and
``README.md``, deletes the template-only files, and starts a new git
history. It is meant to run once per checkout.
"""

from pathlib import Path
from typing import Annotated, NoReturn

import typer

from . import __version__, config
from . import log as kickoff_log
from .io import ask_line, die, say
from .services import ServiceFailure
from .services.setup import (
    ApplySetupRequest,
    ApplySetupService,
    check_template_checkout,
    collect_setup_input,
)

BANNER_RULE = "═" * 59
SECTION_RULE = "─" * 63

app = typer.Typer(
    add_completion=False,
    help="Personalize a backend template checkout.",
    no_args_is_help=False,
)


def _version_callback(value: bool) -> None:
    if value:
        say(__version__)
        raise typer.Exit()


def _log_level_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in kickoff_log.LEVEL_NAMES:
        raise typer.BadParameter(f"expected one of: {', '.join(kickoff_log.LEVEL_NAMES)}")
    return normalized


def _print_banner() -> None:
    kickoff_log.info(f"\n{BANNER_RULE}", style="bold")
    kickoff_log.info("  TypeScript Backend Template - Project Setup", style="bold")
    kickoff_log.info(f"{BANNER_RULE}\n", style="bold")


def _report_step(message: str) -> None:
    kickoff_log.info(f"  ✓ {message}", style="dim")


def _fail(failure: ServiceFailure) -> NoReturn:
    if failure.recovery_hint:
        kickoff_log.info(failure.recovery_hint, style="dim")
    die(failure.message)


def _print_next_steps(project_name: str) -> None:
    say("\n" + SECTION_RULE)
    say("\n✨ Project setup complete!\n")
    say("Next steps:")
    say(f"  1. cd {project_name}")
    say("  2. npm install")
    say("  3. npm run dev")
    say("\nHappy coding! 🚀\n")


@app.command()
def setup(
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            help="Template checkout to personalize (defaults to the current directory).",
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    keep_script: Annotated[
        bool,
        typer.Option("--keep-script", help="Do not delete the setup launcher afterwards."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="JSON file overriding file names and git settings."),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level (trace|debug|info|success|warning|error).",
            callback=_log_level_callback,
        ),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colored output."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Run the one-shot project setup."""
    if log_level is not None:
        kickoff_log.set_level(log_level)
    if no_color:
        kickoff_log.set_no_color(True)

    try:
        setup_config = config.load_setup_config(config_path)
    except config.ConfigError as exc:
        die(str(exc))
    project_root = (root or Path.cwd()).resolve()
    remove_self = setup_config.remove_self and not keep_script
    kickoff_log.debug(f"project root: {project_root}")
    blocked = check_template_checkout(project_root, setup_config, remove_self=remove_self)
    if blocked is not None:
        _fail(blocked)

    _print_banner()
    setup_input = collect_setup_input(ask_line)

    kickoff_log.info("\n" + SECTION_RULE, style="dim")
    kickoff_log.info("Setting up your project...\n", style="blue")

    result = ApplySetupService(report=_report_step).run(
        ApplySetupRequest(
            project_root=project_root,
            setup_input=setup_input,
            config=setup_config,
            remove_self=remove_self,
        )
    )
    if isinstance(result, ServiceFailure):
        _fail(result)

    for warning in result.outcome.warnings:
        if warning.detail:
            kickoff_log.debug(warning.detail)
        kickoff_log.warning(f"  ⚠ {warning.message}")

    _print_next_steps(setup_input.project_name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
