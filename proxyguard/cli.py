from pathlib import Path

import typer
from loguru import logger

from . import cli_help as ch
from . import logs as ls
from .config import settings
from .constants import (
    CLI_ERR_LOAD_MODEL,
    CLI_ERR_RUN,
    CLI_ERR_SCAN,
    CLI_ERR_SOURCE_AND_MODEL,
    CLI_MSG_EXPORTED,
    CLI_MSG_MODEL_SUMMARY,
    CLI_MSG_SUMMARY_CALLS,
    CLI_MSG_SUMMARY_CLASSES,
    CLI_MSG_SUMMARY_EXPORTED_AT,
    CLI_MSG_SUMMARY_KINDS,
    CLI_MSG_SUMMARY_METHODS,
    EXIT_RUN_ERROR,
    EXIT_VIOLATIONS,
    KEY_EXPORTED_AT,
    SEPARATOR_COMMA,
    Color,
)
from .main import (
    app_context,
    configure_logging,
    load_program_model,
    render_results,
    rules_table,
    run_rules,
    scan_sources,
    select_rules,
    style,
)
from .model_loader import ModelLoader, export_model

app = typer.Typer(
    name="proxyguard",
    help=ch.APP_DESCRIPTION,
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def configure(
    log_level: str | None = typer.Option(
        None, "--log-level", help=ch.HELP_LOG_LEVEL
    ),
) -> None:
    configure_logging(log_level)


@app.command(name=ch.CLICommandName.CHECK, help=ch.CMD_CHECK)
def check(
    source: str | None = typer.Option(None, "--source", "-s", help=ch.HELP_SOURCE),
    model_file: str | None = typer.Option(
        None, "--model", "-m", help=ch.HELP_MODEL_FILE
    ),
    rule: list[str] | None = typer.Option(None, "--rule", "-r", help=ch.HELP_RULE),
    workers: int | None = typer.Option(None, "--workers", min=1, help=ch.HELP_WORKERS),
    no_framework_catalog: bool = typer.Option(
        False, "--no-framework-catalog", help=ch.HELP_NO_FRAMEWORK_CATALOG
    ),
) -> None:
    if source and model_file:
        app_context.console.print(style(CLI_ERR_SOURCE_AND_MODEL, Color.RED))
        raise typer.Exit(EXIT_RUN_ERROR)

    try:
        rules = select_rules(rule)
        effective_workers = settings.resolve_workers(workers)
        model = load_program_model(
            source,
            model_file,
            include_catalog=False if no_framework_catalog else None,
        )
        results = run_rules(model, rules, workers=effective_workers)
    except Exception as e:
        app_context.console.print(style(CLI_ERR_RUN.format(error=e), Color.RED))
        logger.error(ls.CHECK_FAILED.format(error=e))
        raise typer.Exit(EXIT_RUN_ERROR) from e

    if not render_results(results):
        raise typer.Exit(EXIT_VIOLATIONS)


@app.command(name=ch.CLICommandName.SCAN, help=ch.CMD_SCAN)
def scan(
    source: str | None = typer.Option(None, "--source", "-s", help=ch.HELP_SOURCE),
    output: str = typer.Option(..., "-o", "--output", help=ch.HELP_OUTPUT_MODEL),
    no_framework_catalog: bool = typer.Option(
        False, "--no-framework-catalog", help=ch.HELP_NO_FRAMEWORK_CATALOG
    ),
) -> None:
    source_path = Path(source or settings.TARGET_SOURCE_PATH)
    try:
        model = scan_sources(source_path, include_catalog=not no_framework_catalog)
        written = export_model(model, output, source=str(source_path.resolve()))
    except Exception as e:
        app_context.console.print(style(CLI_ERR_SCAN.format(error=e), Color.RED))
        logger.error(ls.SCAN_FAILED.format(error=e))
        raise typer.Exit(EXIT_RUN_ERROR) from e

    app_context.console.print(
        style(CLI_MSG_EXPORTED.format(path=written.absolute()), Color.GREEN)
    )


@app.command(name=ch.CLICommandName.RULES, help=ch.CMD_RULES)
def list_rules() -> None:
    app_context.console.print(rules_table())


@app.command(name=ch.CLICommandName.MODEL_SUMMARY, help=ch.CMD_MODEL_SUMMARY)
def model_summary(
    model_file: str = typer.Argument(..., help=ch.HELP_MODEL_FILE_ARG),
) -> None:
    try:
        loader = ModelLoader(model_file)
        summary = loader.summary()
        metadata = loader.metadata
    except Exception as e:
        app_context.console.print(
            style(CLI_ERR_LOAD_MODEL.format(error=e), Color.RED)
        )
        raise typer.Exit(EXIT_RUN_ERROR) from e

    app_context.console.print(style(CLI_MSG_MODEL_SUMMARY, Color.GREEN))
    app_context.console.print(
        CLI_MSG_SUMMARY_CLASSES.format(count=summary["total_classes"])
    )
    app_context.console.print(
        CLI_MSG_SUMMARY_METHODS.format(
            count=summary["total_methods"], annotated=summary["annotated_methods"]
        )
    )
    app_context.console.print(CLI_MSG_SUMMARY_CALLS.format(count=summary["total_calls"]))
    app_context.console.print(
        CLI_MSG_SUMMARY_KINDS.format(
            kinds=SEPARATOR_COMMA.join(
                f"{kind}={count}" for kind, count in summary["class_kinds"].items()
            )
        )
    )
    if exported_at := metadata.get(KEY_EXPORTED_AT):
        app_context.console.print(
            CLI_MSG_SUMMARY_EXPORTED_AT.format(exported_at=exported_at)
        )


if __name__ == "__main__":
    app()
