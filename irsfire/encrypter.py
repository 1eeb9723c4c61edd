"""AES encryption of stored documents in GCM or CBC mode."""

from __future__ import annotations

import math
import os
import string
from dataclasses import dataclass
from datetime import datetime

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

GCM = "GCM"
CBC = "CBC"
MIN_NONCE_SIZE = 12
BLOCK_SIZE = 16
_VALID_KEY_SIZES = (16, 24, 32)

# Used when no key is configured; 32 bytes, so AES-256.
DEFAULT_KEY = "placeholder".ljust(32)


class EncryptionError(ValueError):
    """Raised when data cannot be encrypted or decrypted."""


class UnknownEncryptionTypeError(EncryptionError):
    """Raised for an encryption method other than GCM or CBC."""

    def __init__(self, message: str = "is unknown encryption type") -> None:
        super().__init__(message)


def _hex_decode(value: bytes | bytearray | str) -> bytes:
    text = value.decode("latin-1") if isinstance(value, (bytes, bytearray)) else value
    for char in text:
        if char not in string.hexdigits:
            raise EncryptionError(f"invalid byte: {char!r}")
    if len(text) % 2:
        raise EncryptionError("odd length hex string")
    return bytes.fromhex(text)


def _check_key(key: bytes) -> None:
    if len(key) not in _VALID_KEY_SIZES:
        raise EncryptionError(f"invalid key size {len(key)}")


def _check_nonce(nonce: bytes) -> None:
    if len(nonce) < MIN_NONCE_SIZE:
        raise EncryptionError("incorrect nonce length given to GCM")


def _gcm_encrypt(key: bytes, nonce: bytes, buf: bytes) -> bytes:
    _check_key(key)
    _check_nonce(nonce)
    try:
        return AESGCM(key).encrypt(nonce, buf, None)
    except ValueError as exc:
        raise EncryptionError(str(exc)) from exc


def _gcm_decrypt(key: bytes, nonce: bytes, buf: bytes) -> bytes:
    _check_key(key)
    _check_nonce(nonce)
    try:
        return AESGCM(key).decrypt(nonce, buf, None)
    except InvalidTag as exc:
        raise EncryptionError("message authentication failed") from exc
    except ValueError as exc:
        raise EncryptionError(str(exc)) from exc


def _cbc_encrypt(key: bytes, buf: bytes) -> bytes:
    if len(buf) % BLOCK_SIZE:
        raise EncryptionError("text is not a multiple of the block size")
    _check_key(key)
    # The IV need not be secret, only unique, so it travels in front of the ciphertext.
    iv = os.urandom(BLOCK_SIZE)
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return iv + encryptor.update(buf) + encryptor.finalize()


def _cbc_decrypt(key: bytes, buf: bytes) -> bytes:
    _check_key(key)
    if len(buf) < BLOCK_SIZE:
        raise EncryptionError("text too short")
    iv, ciphertext = buf[:BLOCK_SIZE], buf[BLOCK_SIZE:]
    if len(ciphertext) % BLOCK_SIZE:
        raise EncryptionError("text is not a multiple of the block size")
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    return decryptor.update(ciphertext) + decryptor.finalize()


@dataclass(frozen=True)
class EncryptService:
    """Encrypts and decrypts with a hex-encoded AES key in the given mode."""

    key: bytes
    method: str

    def encrypt(self, buf: bytes, nonce: bytes) -> bytes:
        """Encrypt ``buf``; ``nonce`` is hex encoded and used in GCM mode only."""
        key = _hex_decode(self.key)
        if self.method == GCM:
            return _gcm_encrypt(key, _hex_decode(nonce), bytes(buf))
        if self.method == CBC:
            return _cbc_encrypt(key, bytes(buf))
        raise UnknownEncryptionTypeError()

    def decrypt(self, buf: bytes, nonce: bytes) -> bytes:
        """Decrypt ``buf``; ``nonce`` is hex encoded and used in GCM mode only."""
        key = _hex_decode(self.key)
        if self.method == GCM:
            return _gcm_decrypt(key, _hex_decode(nonce), bytes(buf))
        if self.method == CBC:
            return _cbc_decrypt(key, bytes(buf))
        raise UnknownEncryptionTypeError()


def new_encrypt_service(key: str, method: str) -> EncryptService:
    """Build a service for ``method``; an empty ``key`` selects the default key."""
    if not key:
        key = DEFAULT_KEY
    if method not in (GCM, CBC):
        raise UnknownEncryptionTypeError()
    return EncryptService(create_key(key), method)


def generate_nonce(document_id: str, created: datetime) -> bytes:
    """Hex-encoded nonce made of a document id and its creation time in Unix seconds."""
    seconds = math.floor(created.timestamp())
    return f"{document_id}{seconds}".encode().hex().encode("ascii")


def create_key(key: str) -> bytes:
    """Hex-encode a key phrase."""
    return key.encode().hex().encode("ascii")