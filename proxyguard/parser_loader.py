import importlib

from loguru import logger
from tree_sitter import Language, Parser

from . import constants as cs
from . import exceptions as ex
from . import logs as ls
from .types_defs import LanguageLoader


def _import_java_language() -> LanguageLoader:
    try:
        module = importlib.import_module(cs.TREE_SITTER_JAVA_MODULE)
    except ImportError as e:
        raise RuntimeError(ex.JAVA_GRAMMAR_UNAVAILABLE) from e
    loader: LanguageLoader = getattr(module, cs.QUERY_LANGUAGE)
    return loader


def load_java_parser() -> Parser:
    language = Language(_import_java_language()())
    parser = Parser(language)
    logger.debug(ls.PARSER_READY)
    return parser
