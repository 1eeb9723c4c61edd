import sqlite3
import string
from datetime import datetime, timezone

import pytest

from irsfire.encrypter import CBC, GCM, generate_nonce, new_encrypt_service
from irsfire.storage import (
    DocumentInformation,
    DocumentNotFoundError,
    NullFileError,
    StorageService,
    rand_alphanumeric,
)

ASCII = b"T" + b" " * 749


class _FakeFile:
    def __init__(self, data: bytes) -> None:
        self._data = data

    def ascii(self) -> bytes:
        return self._data


@pytest.fixture
def db():
    connection = sqlite3.connect(":memory:")
    connection.execute(
        "CREATE TABLE documents ("
        "document_id TEXT PRIMARY KEY, pdf BLOB, ascii BLOB, "
        "created_at TEXT, deleted_at TEXT)"
    )
    connection.commit()
    yield connection
    connection.close()


def test_save_and_get_with_explicit_id(db):
    service = StorageService(db)
    before = datetime.now(timezone.utc)
    saved_id = service.save(DocumentInformation(document_id="doc-1", file=_FakeFile(ASCII)))
    after = datetime.now(timezone.utc)

    assert saved_id == "doc-1"
    document = service.get("doc-1")
    assert document.document_id == "doc-1"
    assert document.ascii == ASCII
    assert document.pdf is None
    assert document.deleted is None
    assert before <= document.created <= after


def test_save_generates_id(db):
    service = StorageService(db)
    saved_id = service.save(DocumentInformation(file=_FakeFile(ASCII)))
    assert len(saved_id) == 40
    assert saved_id.isalnum()
    assert service.get(saved_id).ascii == ASCII


def test_save_encrypts_with_gcm(db):
    encrypter = new_encrypt_service("", GCM)
    service = StorageService(db, encrypter)
    saved_id = service.save(DocumentInformation(document_id="doc-2", file=_FakeFile(ASCII)))
    document = service.get(saved_id)
    assert document.ascii != ASCII
    nonce = generate_nonce(saved_id, document.created)
    assert encrypter.decrypt(document.ascii, nonce) == ASCII


def test_save_encrypts_with_cbc(db):
    encrypter = new_encrypt_service("", CBC)
    service = StorageService(db, encrypter)
    data = b"B" * 32
    saved_id = service.save(DocumentInformation(file=_FakeFile(data)))
    stored = service.get(saved_id).ascii
    assert stored != data
    assert encrypter.decrypt(stored, b"") == data


def test_get_missing_document(db):
    service = StorageService(db)
    with pytest.raises(DocumentNotFoundError):
        service.get("missing")
    with pytest.raises(LookupError):
        service.get("")


def test_save_without_file(db):
    service = StorageService(db)
    with pytest.raises(NullFileError):
        service.save(None)
    with pytest.raises(NullFileError):
        service.save(DocumentInformation(document_id="doc-3"))


def test_save_duplicate_id(db):
    service = StorageService(db)
    service.save(DocumentInformation(document_id="doc-4", file=_FakeFile(ASCII)))
    with pytest.raises(sqlite3.IntegrityError):
        service.save(DocumentInformation(document_id="doc-4", file=_FakeFile(ASCII)))
    assert service.get("doc-4").ascii == ASCII


def test_rand_alphanumeric():
    first = rand_alphanumeric(40)
    second = rand_alphanumeric(40)
    allowed = set(string.ascii_letters + string.digits)
    assert len(first) == 40
    assert set(first) <= allowed
    assert first != second
    assert rand_alphanumeric(0) == ""
    with pytest.raises(ValueError):
        rand_alphanumeric(-1)