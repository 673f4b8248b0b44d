from __future__ import annotations

import pytest

from proxyguard.constants import ClassKind
from proxyguard.exceptions import ModelInconsistencyError
from proxyguard.models import JavaMethod
from proxyguard.program_model import ProgramModel
from proxyguard.proxyability import is_proxyable, proxyability_issues
from proxyguard.tests.conftest import make_class, make_method


def model_with(*methods: JavaMethod, final_owner: bool = False) -> ProgramModel:
    modifiers = frozenset({"public", "final"}) if final_owner else frozenset({"public"})
    return ProgramModel(
        classes=[make_class("x.Svc", modifiers=modifiers)], methods=methods
    )


class TestProxyabilityIssues:
    def test_public_instance_method_is_proxyable(self) -> None:
        method = make_method("x.Svc", "run")
        model = model_with(method)
        assert proxyability_issues(method, model) == []
        assert is_proxyable(method, model)

    def test_package_private_method_is_proxyable(self) -> None:
        method = make_method("x.Svc", "run", modifiers=frozenset())
        assert is_proxyable(method, model_with(method))

    @pytest.mark.parametrize(
        ("modifiers", "expected"),
        [
            (frozenset({"private"}), "x.Svc.run() is private"),
            (frozenset({"public", "final"}), "x.Svc.run() is final"),
            (frozenset({"public", "static"}), "x.Svc.run() is static"),
        ],
    )
    def test_single_reason(self, modifiers: frozenset[str], expected: str) -> None:
        method = make_method("x.Svc", "run", modifiers=modifiers)
        assert proxyability_issues(method, model_with(method)) == [expected]

    def test_final_owner(self) -> None:
        method = make_method("x.Svc", "run")
        assert proxyability_issues(method, model_with(method, final_owner=True)) == [
            "x.Svc.run() is declared in final class x.Svc"
        ]

    def test_enum_owner_is_final(self) -> None:
        method = make_method("x.Color", "label")
        model = ProgramModel(
            classes=[make_class("x.Color", kind=ClassKind.ENUM)], methods=[method]
        )
        assert not is_proxyable(method, model)

    def test_reasons_are_ordered(self) -> None:
        method = make_method(
            "x.Svc", "run", modifiers=frozenset({"private", "final", "static"})
        )
        issues = proxyability_issues(method, model_with(method, final_owner=True))
        assert issues == [
            "x.Svc.run() is private",
            "x.Svc.run() is final",
            "x.Svc.run() is declared in final class x.Svc",
            "x.Svc.run() is static",
        ]

    def test_missing_owner_raises(self) -> None:
        method = make_method("x.Gone", "run")
        with pytest.raises(ModelInconsistencyError, match="x.Gone"):
            proxyability_issues(method, ProgramModel(methods=[method]))
