from __future__ import annotations

import textwrap
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from loguru import logger

from proxyguard.models import AnnotationInstance, CallSite, JavaClass, JavaMethod
from proxyguard.program_model import ProgramModel
from proxyguard.spring import annotations as sa
from proxyguard.spring.annotations import framework_catalog

BOOKS = "com.example.books"
BOOK_SERVICE = f"{BOOKS}.BookService"
BOOK_CONTROLLER = f"{BOOKS}.BookController"
FIND_BOOK = f"{BOOK_SERVICE}.findBook(String)"
FIND_BOOK_TITLE = f"{BOOK_SERVICE}.findBookTitle(String)"
SHOW_BOOK = f"{BOOK_CONTROLLER}.showBook(String)"

PUBLIC = frozenset({"public"})


def annotations(*type_names: str) -> tuple[AnnotationInstance, ...]:
    return tuple(AnnotationInstance(name) for name in type_names)


def make_class(name: str, *annotation_names: str, **kwargs: object) -> JavaClass:
    kwargs.setdefault("modifiers", PUBLIC)
    kwargs.setdefault("source_file", name.replace(".", "/") + ".java")
    return JavaClass(name, annotations=annotations(*annotation_names), **kwargs)  # type: ignore[arg-type]


def make_method(
    owner: str,
    name: str,
    *annotation_names: str,
    parameters: tuple[str, ...] = (),
    modifiers: frozenset[str] = PUBLIC,
    **kwargs: object,
) -> JavaMethod:
    return JavaMethod(
        owner=owner,
        name=name,
        parameter_types=parameters,
        modifiers=modifiers,
        annotations=annotations(*annotation_names),
        **kwargs,  # type: ignore[arg-type]
    )


def call(
    origin: JavaMethod,
    target: JavaMethod,
    line: int | None = None,
    target_owner: str | None = None,
) -> CallSite:
    return CallSite(
        origin=origin.full_name,
        origin_owner=origin.owner,
        target=target.full_name,
        target_owner=target_owner or target.owner,
        source_file=origin.owner.replace(".", "/") + ".java",
        line=line,
        origin_is_constructor=origin.is_constructor,
    )


@pytest.fixture
def find_book() -> JavaMethod:
    return make_method(BOOK_SERVICE, "findBook", sa.CACHEABLE, parameters=("String",))


@pytest.fixture
def find_book_title() -> JavaMethod:
    return make_method(BOOK_SERVICE, "findBookTitle", parameters=("String",))


@pytest.fixture
def show_book() -> JavaMethod:
    return make_method(BOOK_CONTROLLER, "showBook", parameters=("String",))


@pytest.fixture
def book_model(
    find_book: JavaMethod, find_book_title: JavaMethod, show_book: JavaMethod
) -> ProgramModel:
    """``BookService.findBook`` is cacheable and called once from its own class
    (``findBookTitle``) and once from ``BookController.showBook``."""
    return ProgramModel(
        classes=[
            make_class(BOOK_SERVICE, sa.SERVICE),
            make_class(BOOK_CONTROLLER, sa.REST_CONTROLLER),
        ],
        methods=[find_book, find_book_title, show_book],
        calls=[
            call(find_book_title, find_book, line=16),
            call(show_book, find_book, line=12),
        ],
    ).with_classes(framework_catalog())


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    messages: list[str] = []
    handler_id = logger.add(
        lambda msg: messages.append(str(msg)), level="DEBUG", format="{message}"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def write_java(tmp_path: Path) -> Callable[[str, str], Path]:
    def write(relative_path: str, source: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
        return path

    return write
