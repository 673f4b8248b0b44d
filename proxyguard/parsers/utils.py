from functools import lru_cache

from ..constants import ENCODING_UTF8
from ..types_defs import ASTNode, TreeSitterNodeProtocol


@lru_cache(maxsize=10000)
def _cached_decode_bytes(text_bytes: bytes) -> str:
    return text_bytes.decode(ENCODING_UTF8)


def safe_decode_text(node: ASTNode | TreeSitterNodeProtocol | None) -> str | None:
    if node is None or node.text is None:
        return None
    text_bytes = node.text
    if isinstance(text_bytes, bytes):
        return _cached_decode_bytes(text_bytes)
    return str(text_bytes)


def node_line(node: ASTNode) -> int:
    return node.start_point[0] + 1
