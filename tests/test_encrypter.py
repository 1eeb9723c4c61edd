from datetime import datetime, timezone

import pytest

from irsfire.encrypter import (
    CBC,
    GCM,
    EncryptionError,
    EncryptService,
    UnknownEncryptionTypeError,
    create_key,
    generate_nonce,
    new_encrypt_service,
)

PLAINTEXT = b"exampleplaintext"


@pytest.fixture
def nonce():
    return generate_nonce("test", datetime.now())


@pytest.fixture
def valid_key_hex():
    return create_key("placeholder".ljust(32))


def test_encryption_with_gcm(nonce):
    service = new_encrypt_service("", GCM)
    encrypted = service.encrypt(PLAINTEXT, nonce)
    assert encrypted != PLAINTEXT
    assert service.decrypt(encrypted, nonce) == PLAINTEXT


def test_encryption_with_cbc(nonce):
    service = new_encrypt_service("", CBC)
    encrypted = service.encrypt(PLAINTEXT, nonce)
    assert len(encrypted) == len(PLAINTEXT) + 16
    assert service.decrypt(encrypted, nonce) == PLAINTEXT


def test_gcm_ciphertext_carries_tag(nonce):
    service = new_encrypt_service("", GCM)
    assert len(service.encrypt(PLAINTEXT, nonce)) == len(PLAINTEXT) + 16


def test_gcm_tampered_ciphertext_fails(nonce):
    service = new_encrypt_service("", GCM)
    encrypted = bytearray(service.encrypt(PLAINTEXT, nonce))
    encrypted[0] ^= 0xFF
    with pytest.raises(EncryptionError) as excinfo:
        service.decrypt(bytes(encrypted), nonce)
    assert str(excinfo.value) == "message authentication failed"


def test_with_invalid_type(nonce):
    with pytest.raises(UnknownEncryptionTypeError) as excinfo:
        new_encrypt_service("", "Unknown")
    assert str(excinfo.value) == "is unknown encryption type"
    service = EncryptService(key=b"", method="Unknown")
    with pytest.raises(UnknownEncryptionTypeError) as excinfo:
        service.encrypt(PLAINTEXT, nonce)
    assert str(excinfo.value) == "is unknown encryption type"
    with pytest.raises(UnknownEncryptionTypeError) as excinfo:
        service.decrypt(PLAINTEXT, nonce)
    assert str(excinfo.value) == "is unknown encryption type"


def test_with_invalid_key(nonce):
    odd_key_hex = create_key("x" * 32)[:-1]
    service = EncryptService(key=odd_key_hex, method=GCM)
    with pytest.raises(EncryptionError) as excinfo:
        service.encrypt(PLAINTEXT, nonce)
    assert str(excinfo.value) == "odd length hex string"
    with pytest.raises(EncryptionError) as excinfo:
        service.decrypt(PLAINTEXT, nonce)
    assert str(excinfo.value) == "odd length hex string"

    short_key_hex = create_key("x" * 31)
    for method in (GCM, CBC):
        service = EncryptService(key=short_key_hex, method=method)
        with pytest.raises(EncryptionError) as excinfo:
            service.encrypt(PLAINTEXT, nonce)
        assert str(excinfo.value) == "invalid key size 31"
        with pytest.raises(EncryptionError) as excinfo:
            service.decrypt(PLAINTEXT, nonce)
        assert str(excinfo.value) == "invalid key size 31"


def test_with_invalid_nonce(valid_key_hex):
    service = EncryptService(key=valid_key_hex, method=GCM)
    odd_nonce = b"64a9433eae7ccceee2fc0ed"
    with pytest.raises(EncryptionError) as excinfo:
        service.encrypt(PLAINTEXT, odd_nonce)
    assert str(excinfo.value) == "odd length hex string"
    with pytest.raises(EncryptionError) as excinfo:
        service.decrypt(PLAINTEXT, odd_nonce)
    assert str(excinfo.value) == "odd length hex string"

    short_nonce = b"64a9433eae7ccceee2fc0e"
    with pytest.raises(EncryptionError) as excinfo:
        service.encrypt(PLAINTEXT, short_nonce)
    assert str(excinfo.value) == "incorrect nonce length given to GCM"
    with pytest.raises(EncryptionError) as excinfo:
        service.decrypt(PLAINTEXT, short_nonce)
    assert str(excinfo.value) == "incorrect nonce length given to GCM"


def test_err_using_cbc(valid_key_hex):
    service = EncryptService(key=valid_key_hex, method=CBC)
    nonce = b"64a9433eae7ccceee2fc0eda"
    with pytest.raises(EncryptionError) as excinfo:
        service.encrypt(PLAINTEXT[1:], nonce)
    assert str(excinfo.value) == "text is not a multiple of the block size"
    with pytest.raises(EncryptionError) as excinfo:
        service.decrypt(PLAINTEXT[:11], nonce)
    assert str(excinfo.value) == "text too short"
    with pytest.raises(EncryptionError) as excinfo:
        service.decrypt(b"exampleplaintextexampleplaintex", nonce)
    assert str(excinfo.value) == "text is not a multiple of the block size"


def test_generate_nonce_pinned():
    created = datetime.fromtimestamp(0, timezone.utc)
    assert generate_nonce("test", created) == b"7465737430"


def test_create_key_is_hex():
    assert create_key("ab") == b"6162"


def test_custom_key_round_trip(nonce):
    service = new_encrypt_service("y" * 16, GCM)
    other = new_encrypt_service("z" * 16, GCM)
    encrypted = service.encrypt(PLAINTEXT, nonce)
    assert service.decrypt(encrypted, nonce) == PLAINTEXT
    with pytest.raises(EncryptionError):
        other.decrypt(encrypted, nonce)