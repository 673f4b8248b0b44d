from __future__ import annotations

import pytest

from proxyguard.constants import ClassKind
from proxyguard.exceptions import ModelInconsistencyError
from proxyguard.models import CallSite, JavaMethod
from proxyguard.program_model import ProgramModel
from proxyguard.spring import annotations as sa
from proxyguard.tests.conftest import (
    BOOK_CONTROLLER,
    BOOK_SERVICE,
    FIND_BOOK,
    call,
    make_class,
    make_method,
)


class TestConstruction:
    def test_duplicate_class_raises(self) -> None:
        with pytest.raises(ModelInconsistencyError, match="more than once"):
            ProgramModel(classes=[make_class("a.A"), make_class("a.A")])

    def test_duplicate_method_raises(self) -> None:
        with pytest.raises(ModelInconsistencyError, match=r"a\.A\.run\(\)"):
            ProgramModel(
                classes=[make_class("a.A")],
                methods=[make_method("a.A", "run"), make_method("a.A", "run")],
            )

    def test_overloads_are_distinct(self) -> None:
        model = ProgramModel(
            classes=[make_class("a.A")],
            methods=[
                make_method("a.A", "run"),
                make_method("a.A", "run", parameters=("int",)),
            ],
        )
        assert len(model.methods_of("a.A")) == 2


class TestLookups:
    def test_require_class(self, book_model: ProgramModel) -> None:
        assert book_model.require_class(BOOK_SERVICE).simple_name == "BookService"
        with pytest.raises(ModelInconsistencyError, match="no class 'x.Missing'"):
            book_model.require_class("x.Missing")

    def test_require_method(self, book_model: ProgramModel) -> None:
        assert book_model.require_method(FIND_BOOK).name == "findBook"
        with pytest.raises(ModelInconsistencyError, match="no method"):
            book_model.require_method("x.Missing.run()")

    def test_get_returns_none_for_unknown(self, book_model: ProgramModel) -> None:
        assert book_model.get_class("x.Missing") is None
        assert book_model.get_method("x.Missing.run()") is None

    def test_calls_to_keeps_recorded_order(
        self, book_model: ProgramModel, find_book: JavaMethod
    ) -> None:
        lines = [c.line for c in book_model.calls_to(find_book)]
        assert lines == [16, 12]

    def test_calls_to_uncalled_method(
        self, book_model: ProgramModel, show_book: JavaMethod
    ) -> None:
        assert book_model.calls_to(show_book) == ()

    def test_contains(self, book_model: ProgramModel) -> None:
        assert BOOK_CONTROLLER in book_model
        assert FIND_BOOK in book_model
        assert "x.Missing" not in book_model

    def test_supertypes_of_unknown_class(self, book_model: ProgramModel) -> None:
        assert book_model.supertypes_of("x.Missing") == ()
        assert book_model.annotations_of("x.Missing") == ()


class TestWithClasses:
    def test_adds_missing_classes(self) -> None:
        model = ProgramModel(classes=[make_class("a.A")])
        merged = model.with_classes([make_class("a.B")])
        assert [c.name for c in merged.classes] == ["a.A", "a.B"]
        assert [c.name for c in model.classes] == ["a.A"]

    def test_existing_declaration_wins(self) -> None:
        own = make_class("a.A", "a.Marker")
        model = ProgramModel(classes=[own])
        merged = model.with_classes([make_class("a.A")])
        assert merged is model
        assert merged.require_class("a.A") == own


class TestValidate:
    def test_consistent_model_passes(self, book_model: ProgramModel) -> None:
        book_model.validate()

    def test_method_owner_missing(self) -> None:
        model = ProgramModel(methods=[make_method("a.A", "run")])
        with pytest.raises(ModelInconsistencyError, match="unknown class 'a.A'"):
            model.validate()

    def test_unknown_call_origin(self) -> None:
        target = make_method("a.A", "run")
        ghost = make_method("a.A", "ghost")
        model = ProgramModel(
            classes=[make_class("a.A")], methods=[target], calls=[call(ghost, target)]
        )
        with pytest.raises(ModelInconsistencyError, match="unknown method"):
            model.validate()

    def test_unknown_call_target(self) -> None:
        origin = make_method("a.A", "run")
        ghost = make_method("a.A", "ghost")
        model = ProgramModel(
            classes=[make_class("a.A")], methods=[origin], calls=[call(origin, ghost)]
        )
        with pytest.raises(ModelInconsistencyError, match="targets unknown method"):
            model.validate()

    def test_origin_owner_mismatch(self) -> None:
        origin = make_method("a.A", "run")
        target = make_method("a.B", "go")
        site = call(origin, target)
        forged = CallSite(
            origin=site.origin,
            origin_owner="a.B",
            target=site.target,
            target_owner=site.target_owner,
        )
        model = ProgramModel(
            classes=[make_class("a.A"), make_class("a.B")],
            methods=[origin, target],
            calls=[forged],
        )
        with pytest.raises(ModelInconsistencyError, match="claims origin owner"):
            model.validate()

    def test_validate_logs(
        self, book_model: ProgramModel, log_messages: list[str]
    ) -> None:
        book_model.validate()
        assert any("consistency" in m for m in log_messages)


class TestSummary:
    def test_counts(self, book_model: ProgramModel) -> None:
        summary = book_model.summary()
        assert summary["total_methods"] == 3
        assert summary["total_calls"] == 2
        assert summary["annotated_methods"] == 1
        assert summary["class_kinds"][ClassKind.CLASS] == 2
        assert summary["class_kinds"][ClassKind.ANNOTATION] >= 1
        assert summary["total_classes"] == len(book_model.classes)

    def test_empty_model(self) -> None:
        summary = ProgramModel().summary()
        assert summary["total_classes"] == 0
        assert summary["class_kinds"] == {}


def test_catalog_does_not_shadow_stereotypes(book_model: ProgramModel) -> None:
    service = book_model.require_class(sa.SERVICE)
    assert service.is_annotation
    assert [a.type_name for a in service.annotations] == [sa.COMPONENT]
