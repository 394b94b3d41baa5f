"""Document loading for files and standard input.

Parsing uses the stdlib ``json`` module; ``NaN``/``Infinity``/``-Infinity``
literals become ``NonFiniteFloat`` markers so they can be shown and copied
back out unchanged.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import BinaryIO

from ..errors import DocumentError
from .values import NonFiniteFloat

logger = logging.getLogger(__name__)

STDIN_NAME = "(stdin)"


@dataclass(frozen=True)
class Document:
    """One parsed input document."""

    name: str
    value: object
    byte_size: int


@dataclass
class LoadResult:
    documents: list[Document] = field(default_factory=list)
    errors: list[DocumentError] = field(default_factory=list)

    @property
    def any_parsed(self) -> bool:
        return bool(self.documents)

    @property
    def all_parsed(self) -> bool:
        return not self.errors


def parse_document(data: bytes | str) -> object:
    """Parse JSON text, accepting the non-standard non-finite literals.

    Raises ``ValueError`` (``json.JSONDecodeError`` or ``UnicodeDecodeError``)
    or ``RecursionError`` for input that cannot be represented.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8-sig")
    return json.loads(data, parse_constant=NonFiniteFloat)


def _parse_named(name: str, data: bytes, describe: str) -> Document:
    try:
        value = parse_document(data)
    except (ValueError, RecursionError) as exc:
        raise DocumentError(name, f"Error parsing JSON {describe}: {exc}") from exc
    return Document(name=name, value=value, byte_size=len(data))


def load_path(path: str) -> Document:
    """Read and parse one file, raising ``DocumentError`` on failure."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise DocumentError(path, f"Failed to open file: {path}") from exc
    return _parse_named(path, data, f"in {path}")


def load_stream(stream: BinaryIO, name: str = STDIN_NAME) -> Document | None:
    """Parse a whole binary stream; empty input yields ``None``."""
    data = stream.read()
    if not data:
        return None
    return _parse_named(name, data, "from stdin" if name == STDIN_NAME else f"in {name}")


def load_documents(paths: Iterable[str], stdin: BinaryIO | None = None) -> LoadResult:
    """Load every path, or ``stdin`` when no paths are given.

    Failures are collected per document and never stop the remaining ones.
    """
    result = LoadResult()
    path_list = list(paths)
    for path in path_list:
        try:
            result.documents.append(load_path(path))
        except DocumentError as exc:
            logger.warning("document %s failed: %s", exc.name, exc.message)
            result.errors.append(exc)
    if not path_list and stdin is not None:
        try:
            document = load_stream(stdin)
        except DocumentError as exc:
            logger.warning("document %s failed: %s", exc.name, exc.message)
            result.errors.append(exc)
        else:
            if document is not None:
                result.documents.append(document)
    logger.debug("loaded %d document(s), %d error(s)", len(result.documents), len(result.errors))
    return result
