from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from proxyguard import cli
from proxyguard.cli import app
from proxyguard.constants import EXIT_RUN_ERROR, EXIT_VIOLATIONS
from proxyguard.main import app_context
from proxyguard.model_loader import export_model
from proxyguard.program_model import ProgramModel
from proxyguard.spring.annotations import framework_catalog
from proxyguard.tests.conftest import make_class

try:
    import tree_sitter_java  # noqa: F401

    JAVA_AVAILABLE = True
except ImportError:
    JAVA_AVAILABLE = False

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_cli(monkeypatch: pytest.MonkeyPatch) -> list[str | None]:
    levels: list[str | None] = []
    monkeypatch.setattr(cli, "configure_logging", levels.append)
    monkeypatch.setattr(app_context, "console", Console(width=300))
    return levels


@pytest.fixture
def violating_model_file(book_model: ProgramModel, tmp_path: Path) -> Path:
    return export_model(book_model, tmp_path / "books.json")


@pytest.fixture
def clean_model_file(tmp_path: Path) -> Path:
    model = ProgramModel(classes=[make_class("x.A")]).with_classes(
        framework_catalog()
    )
    return export_model(model, tmp_path / "clean.json")


class TestRulesCommand:
    def test_lists_registered_rules(self) -> None:
        result = runner.invoke(app, ["rules"])
        assert result.exit_code == 0
        assert "Available rules" in result.output
        assert "retryable-methods-proxyable" in result.output

    def test_log_level_option(self, quiet_cli: list[str | None]) -> None:
        runner.invoke(app, ["--log-level", "debug", "rules"])
        assert quiet_cli == ["debug"]


class TestCheckCommand:
    def test_violations_exit_with_one(self, violating_model_file: Path) -> None:
        result = runner.invoke(app, ["check", "--model", str(violating_model_file)])
        assert result.exit_code == EXIT_VIOLATIONS
        assert "FAILED  cacheable-not-called-from-same-class" in result.output
        assert "1 of 3 rules failed." in result.output

    def test_clean_model_passes(self, clean_model_file: Path) -> None:
        result = runner.invoke(app, ["check", "-m", str(clean_model_file)])
        assert result.exit_code == 0
        assert "All 3 rules passed." in result.output

    def test_selected_rule_only(self, violating_model_file: Path) -> None:
        result = runner.invoke(
            app,
            [
                "check",
                "--model",
                str(violating_model_file),
                "--rule",
                "retryable-methods-proxyable",
                "--workers",
                "2",
            ],
        )
        assert result.exit_code == 0
        assert "All 1 rules passed." in result.output

    def test_unknown_rule(self, violating_model_file: Path) -> None:
        result = runner.invoke(
            app, ["check", "-m", str(violating_model_file), "-r", "no-such-rule"]
        )
        assert result.exit_code == EXIT_RUN_ERROR
        assert "Unknown rule 'no-such-rule'" in result.output

    def test_source_and_model_are_exclusive(
        self, violating_model_file: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            app,
            ["check", "--source", str(tmp_path), "--model", str(violating_model_file)],
        )
        assert result.exit_code == EXIT_RUN_ERROR
        assert "Use either --source or --model" in result.output

    def test_missing_model_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", "-m", str(tmp_path / "absent.json")])
        assert result.exit_code == EXIT_RUN_ERROR
        assert "Check run failed" in result.output


class TestModelSummaryCommand:
    def test_prints_summary(self, violating_model_file: Path) -> None:
        result = runner.invoke(app, ["model-summary", str(violating_model_file)])
        assert result.exit_code == 0
        assert "Total call sites: 2" in result.output
        assert "Total methods: 3 (1 annotated)" in result.output
        assert "Exported at:" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["model-summary", str(tmp_path / "absent.json")])
        assert result.exit_code == EXIT_RUN_ERROR
        assert "Failed to load program model" in result.output


@pytest.mark.skipif(not JAVA_AVAILABLE, reason="tree-sitter-java not installed")
class TestSourceCommands:
    SOURCE = """
    package com.example.books;

    import org.springframework.cache.annotation.Cacheable;

    public class BookService {
        @Cacheable("books")
        public String findBook(String isbn) { return isbn; }

        public String findBookTitle(String isbn) { return findBook(isbn); }
    }
    """

    def test_check_sources(
        self, write_java: Callable[[str, str], Path], tmp_path: Path
    ) -> None:
        write_java("src/com/example/books/BookService.java", self.SOURCE)
        result = runner.invoke(app, ["check", "--source", str(tmp_path / "src")])
        assert result.exit_code == EXIT_VIOLATIONS
        assert "BookService.java:9" in result.output

    def test_scan_then_check(
        self, write_java: Callable[[str, str], Path], tmp_path: Path
    ) -> None:
        write_java("src/com/example/books/BookService.java", self.SOURCE)
        output = tmp_path / "out" / "model.json"
        scanned = runner.invoke(
            app, ["scan", "--source", str(tmp_path / "src"), "-o", str(output)]
        )
        assert scanned.exit_code == 0
        assert output.exists()

        checked = runner.invoke(app, ["check", "--model", str(output)])
        assert checked.exit_code == EXIT_VIOLATIONS

    def test_scan_missing_source(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["scan", "-s", str(tmp_path / "nowhere"), "-o", str(tmp_path / "m.json")],
        )
        assert result.exit_code == EXIT_RUN_ERROR
        assert "Scan failed" in result.output
