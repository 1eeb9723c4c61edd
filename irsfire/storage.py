"""Storage of FIRE documents in an SQL database."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol

from irsfire.encrypter import EncryptService, generate_nonce

_ALPHANUMERIC = string.ascii_letters + string.digits
_DOCUMENT_ID_LENGTH = 40
_DOCUMENT_COLUMNS = "document_id, pdf, ascii, created_at, deleted_at"


class StorageError(Exception):
    """Raised when a document cannot be stored or read."""


class NullFileError(StorageError):
    """Raised when a document has no file to store."""

    def __init__(self, message: str = "should exist a file to store") -> None:
        super().__init__(message)


class DocumentNotFoundError(StorageError, LookupError):
    """Raised when no document has the requested id."""


class AsciiSource(Protocol):
    """Anything that renders itself in the FIRE ASCII format."""

    def ascii(self) -> bytes: ...


@dataclass
class Document:
    """A stored document as read back from the database."""

    document_id: str
    ascii: bytes
    pdf: bytes | None = None
    created: datetime | None = None
    deleted: datetime | None = None


@dataclass
class DocumentInformation:
    """A file to store, with an optional id and metadata."""

    document_id: str = ""
    file: AsciiSource | None = None
    metadata: dict[str, str] = field(default_factory=dict)


def rand_alphanumeric(length: int) -> str:
    """Random string of ASCII letters and digits."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(length))


def _to_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode()
    return datetime.fromisoformat(value)


class StorageService:
    """Saves documents to and loads them from a ``documents`` table."""

    def __init__(self, db: Any, encrypter: EncryptService | None = None) -> None:
        self._db = db
        self._encrypter = encrypter

    def save(self, doc: DocumentInformation | None) -> str:
        """Store the ASCII form of the document's file and return its id."""
        if doc is None or doc.file is None:
            raise NullFileError()

        document_id = doc.document_id or rand_alphanumeric(_DOCUMENT_ID_LENGTH)
        ascii_data = doc.file.ascii()
        created = datetime.now(timezone.utc)
        if self._encrypter is not None:
            nonce = generate_nonce(document_id, created)
            ascii_data = self._encrypter.encrypt(ascii_data, nonce)

        cursor = self._db.cursor()
        try:
            cursor.execute(
                "INSERT INTO documents(document_id, pdf, ascii, created_at) "
                "VALUES (?, ?, ?, ?)",
                (document_id, None, bytes(ascii_data), created.isoformat()),
            )
            if cursor.rowcount != 1:
                self._db.rollback()
                raise StorageError("no rows affected")
            self._db.commit()
        finally:
            cursor.close()
        return document_id

    def get(self, document_id: str) -> Document:
        """Load the document with the given id, its ASCII as stored."""
        cursor = self._db.cursor()
        try:
            cursor.execute(
                f"SELECT {_DOCUMENT_COLUMNS} FROM documents WHERE document_id = ? LIMIT 1",
                (document_id,),
            )
            rows = cursor.fetchall()
        finally:
            cursor.close()

        if len(rows) != 1:
            raise DocumentNotFoundError(f"no document with id {document_id!r}")

        stored_id, pdf, ascii_data, created, deleted = rows[0]
        return Document(
            document_id=stored_id,
            ascii=bytes(ascii_data) if ascii_data is not None else b"",
            pdf=bytes(pdf) if pdf is not None else None,
            created=_to_datetime(created),
            deleted=_to_datetime(deleted),
        )