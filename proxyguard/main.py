from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from loguru import logger
from rich.table import Table

from . import constants as cs
from . import exceptions as ex
from . import logs as ls
from .config import settings
from .model_loader import load_model
from .models import AppContext
from .parser_loader import load_java_parser
from .parsers import JavaModelBuilder
from .predicates import AnalysisContext
from .program_model import ProgramModel
from .rules import ArchRule, EvaluationResult
from .spring import RULES
from .spring.annotations import framework_catalog


def style(
    text: str, color: cs.Color, modifier: cs.StyleModifier = cs.StyleModifier.BOLD
) -> str:
    if modifier == cs.StyleModifier.NONE:
        return f"[{color}]{text}[/{color}]"
    return f"[{modifier} {color}]{text}[/{modifier} {color}]"


app_context = AppContext()


def configure_logging(level: str | None = None) -> None:
    logger.remove()
    logger.add(
        sys.stderr, format=cs.LOG_FORMAT, level=(level or settings.LOG_LEVEL).upper()
    )


def scan_sources(source: str | Path, include_catalog: bool = True) -> ProgramModel:
    known_types = [c.name for c in framework_catalog()] if include_catalog else []
    builder = JavaModelBuilder(
        source,
        load_java_parser(),
        file_glob=settings.JAVA_FILE_GLOB,
        excluded_dirs=settings.EXCLUDED_DIRS,
        known_types=known_types,
    )
    return builder.build()


def with_framework_catalog(model: ProgramModel) -> ProgramModel:
    merged = model.with_classes(framework_catalog())
    logger.debug(
        ls.CATALOG_MERGED.format(count=len(merged.classes) - len(model.classes))
    )
    return merged


def load_program_model(
    source: str | None = None,
    model_file: str | None = None,
    include_catalog: bool | None = None,
) -> ProgramModel:
    """Build the model for a check run from sources or from a model file.

    Falls back to ``MODEL_FILE`` and then ``TARGET_SOURCE_PATH`` when neither
    is given. The framework catalog is merged before validation so library
    annotations and repository interfaces resolve like scanned ones.
    """
    if include_catalog is None:
        include_catalog = settings.INCLUDE_FRAMEWORK_CATALOG

    if model_file is None and source is None:
        model_file = settings.MODEL_FILE

    if model_file is not None:
        app_context.console.print(
            style(cs.CLI_MSG_LOADING_MODEL.format(path=model_file), cs.Color.CYAN)
        )
        model = load_model(model_file)
    else:
        source_path = source or settings.TARGET_SOURCE_PATH
        app_context.console.print(
            style(cs.CLI_MSG_SCANNING.format(path=source_path), cs.Color.CYAN)
        )
        model = scan_sources(source_path, include_catalog)

    if include_catalog:
        model = with_framework_catalog(model)
    model.validate()

    app_context.console.print(
        cs.CLI_MSG_MODEL_READY.format(
            classes=len(model.classes),
            methods=len(model.methods),
            calls=len(model.calls),
        )
    )
    return model


def select_rules(names: Sequence[str] | None = None) -> list[ArchRule]:
    if not names:
        return list(RULES.values())
    unknown = [name for name in names if name not in RULES]
    if unknown:
        raise ValueError(
            ex.UNKNOWN_RULE.format(
                rule=unknown[0], available=cs.SEPARATOR_COMMA.join(RULES)
            )
        )
    return [RULES[name] for name in names]


def run_rules(
    model: ProgramModel, rules: Iterable[ArchRule], workers: int = 1
) -> list[EvaluationResult]:
    # (H) one context per run so every rule shares the resolver cache
    context = AnalysisContext.for_model(model)
    return [rule.evaluate(context, workers=workers) for rule in rules]


def _violation_table(result: EvaluationResult) -> Table:
    table = Table(title=style(result.rule.description, cs.Color.RED))
    table.add_column(cs.TABLE_COLUMN_ELEMENT, style=cs.Color.CYAN)
    table.add_column(cs.TABLE_COLUMN_DETAIL, style=cs.Color.MAGENTA)
    for violation in result.violations:
        table.add_row(violation.element_name, violation.description)
    return table


def render_results(results: Sequence[EvaluationResult]) -> bool:
    failed = [result for result in results if not result.passed]
    for result in results:
        name = result.rule.display_name
        if result.passed:
            app_context.console.print(
                style(cs.CLI_MSG_RULE_PASSED.format(rule=name), cs.Color.GREEN)
            )
            continue
        app_context.console.print(
            style(
                cs.CLI_MSG_RULE_FAILED.format(rule=name, count=len(result.violations)),
                cs.Color.RED,
            )
        )
        app_context.console.print(_violation_table(result))

    if failed:
        app_context.console.print(
            style(
                cs.CLI_MSG_SOME_FAILED.format(failed=len(failed), count=len(results)),
                cs.Color.RED,
            )
        )
        return False
    app_context.console.print(
        style(cs.CLI_MSG_ALL_PASSED.format(count=len(results)), cs.Color.GREEN)
    )
    return True


def rules_table() -> Table:
    table = Table(title=style(cs.TABLE_TITLE_RULES, cs.Color.GREEN))
    table.add_column(cs.TABLE_COLUMN_RULE, style=cs.Color.CYAN)
    table.add_column(cs.TABLE_COLUMN_DESCRIPTION, style=cs.Color.MAGENTA)
    for name, rule in RULES.items():
        table.add_row(name, rule.description)
    return table
