from __future__ import annotations

import pytest

from proxyguard.constants import ClassKind, Visibility
from proxyguard.models import AnnotationInstance, CallSite, JavaClass, JavaMethod
from proxyguard.tests.conftest import make_class, make_method


class TestJavaClass:
    def test_names(self) -> None:
        java_class = make_class("com.example.books.BookService")
        assert java_class.simple_name == "BookService"
        assert java_class.package_name == "com.example.books"
        assert java_class.full_name == str(java_class)

    def test_default_package(self) -> None:
        assert JavaClass("Standalone").package_name == ""

    def test_supertypes_put_superclass_first(self) -> None:
        java_class = JavaClass("a.C", superclass="a.Base", interfaces=("a.I", "a.J"))
        assert java_class.supertypes == ("a.Base", "a.I", "a.J")
        assert JavaClass("a.D", interfaces=("a.I",)).supertypes == ("a.I",)

    @pytest.mark.parametrize(
        ("kind", "modifiers", "expected"),
        [
            (ClassKind.CLASS, frozenset(), False),
            (ClassKind.CLASS, frozenset({"final"}), True),
            (ClassKind.ENUM, frozenset(), True),
            (ClassKind.RECORD, frozenset(), True),
            (ClassKind.INTERFACE, frozenset(), False),
        ],
    )
    def test_is_final(
        self, kind: ClassKind, modifiers: frozenset[str], expected: bool
    ) -> None:
        assert JavaClass("a.C", kind=kind, modifiers=modifiers).is_final is expected


class TestJavaMethod:
    def test_full_name_lists_parameter_types(self) -> None:
        method = make_method("a.C", "find", parameters=("String", "int"))
        assert method.full_name == "a.C.find(String, int)"
        assert make_method("a.C", "run").full_name == "a.C.run()"

    @pytest.mark.parametrize(
        ("modifiers", "expected"),
        [
            (frozenset({"public", "static"}), Visibility.PUBLIC),
            (frozenset({"protected"}), Visibility.PROTECTED),
            (frozenset({"private", "final"}), Visibility.PRIVATE),
            (frozenset(), Visibility.PACKAGE),
        ],
    )
    def test_visibility(self, modifiers: frozenset[str], expected: Visibility) -> None:
        assert JavaMethod("a.C", "m", modifiers=modifiers).visibility == expected

    def test_modifier_flags(self) -> None:
        method = JavaMethod("a.C", "m", modifiers=frozenset({"private", "static"}))
        assert method.is_private
        assert method.is_static
        assert not method.is_final


class TestAnnotationInstance:
    def test_attributes_do_not_affect_equality(self) -> None:
        plain = AnnotationInstance("a.Cached")
        configured = AnnotationInstance("a.Cached", {"value": "books"})
        assert plain == configured
        assert hash(plain) == hash(configured)

    def test_simple_name(self) -> None:
        assert AnnotationInstance("org.x.Cacheable").simple_name == "Cacheable"


class TestCallSite:
    def test_description(self) -> None:
        site = CallSite(
            origin="a.C.caller()",
            origin_owner="a.C",
            target="a.C.callee()",
            target_owner="a.C",
            source_file="src/a/C.java",
            line=7,
        )
        assert site.description == (
            "Method <a.C.caller()> calls method <a.C.callee()> in (C.java:7)"
        )
        assert site.is_same_class

    def test_constructor_origin(self) -> None:
        site = CallSite(
            origin="a.C.<init>()",
            origin_owner="a.C",
            target="a.B.go()",
            target_owner="a.B",
            source_file="C.java",
            origin_is_constructor=True,
        )
        assert site.description.startswith("Constructor <a.C.<init>()>")
        assert site.location == "C.java"
        assert not site.is_same_class

    def test_unknown_location(self) -> None:
        site = CallSite("a.C.x()", "a.C", "a.C.y()", "a.C")
        assert site.location == "unknown location"
