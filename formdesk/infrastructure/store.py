"""Infrastructure layer for submission persistence.

The whole state of the service is a single JSON document holding the
``submissions`` and ``logs`` arrays.  Every operation loads it fresh and writes
it back in full; nothing is cached between calls.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from formdesk.core.schema import Document

logger = logging.getLogger(__name__)


class StorageCorruptError(RuntimeError):
    """Raised when the persisted document cannot be parsed."""


class DocumentStore(Protocol):
    """Persistence contract for the submissions document."""

    def load(self) -> Document: ...

    def save(self, document: Document) -> None: ...


def _serialise(document: Document) -> str:
    return json.dumps(document.to_payload(), indent=2, ensure_ascii=False)


def _parse(raw: str | bytes, source: str) -> Document:
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return Document.model_validate(json.loads(raw))
    except (UnicodeDecodeError, RecursionError, json.JSONDecodeError, ValidationError) as exc:
        raise StorageCorruptError(f"cannot parse submissions document at {source}") from exc


class JsonFileStore:
    """Stores the document as a JSON file, creating it on first use."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> Document:
        if not self._path.exists():
            logger.info("initialising submissions document at %s", self._path)
            document = Document()
            self.save(document)
            return document
        return _parse(self._path.read_bytes(), str(self._path))

    def save(self, document: Document) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = _serialise(document)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as buffer:
                buffer.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class InMemoryDocumentStore:
    """Simple in-memory store for fast iteration and tests.

    The document is held in serialised form so callers never share mutable
    state with the store between ``load`` and ``save``.
    """

    def __init__(self, raw: str | None = None) -> None:
        self._raw = raw if raw is not None else _serialise(Document())

    @property
    def raw(self) -> str:
        return self._raw

    def load(self) -> Document:
        return _parse(self._raw, "<memory>")

    def save(self, document: Document) -> None:
        self._raw = _serialise(document)

    def reset(self) -> None:
        self._raw = _serialise(Document())
