"""Symmetric and RSA helpers used for the Steam channel encryption."""

from __future__ import annotations

import os

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16


def _check_blocks(data: bytes) -> None:
    if len(data) % BLOCK_SIZE != 0:
        raise ValueError("input not full blocks")


def _run(cipher: Cipher, data: bytes, encrypt: bool) -> bytes:
    ctx = cipher.encryptor() if encrypt else cipher.decryptor()
    return ctx.update(data) + ctx.finalize()


def ecb_encrypt(key: bytes, data: bytes) -> bytes:
    """Encrypt whole blocks with AES in ECB mode."""
    _check_blocks(data)
    return _run(Cipher(algorithms.AES(bytes(key)), modes.ECB()), bytes(data), True)


def ecb_decrypt(key: bytes, data: bytes) -> bytes:
    """Decrypt whole blocks with AES in ECB mode."""
    _check_blocks(data)
    return _run(Cipher(algorithms.AES(bytes(key)), modes.ECB()), bytes(data), False)


def pad_pkcs7_with_iv(data: bytes) -> bytes:
    """Pad with PKCS#7 and prepend one empty block to hold the IV."""
    missing = BLOCK_SIZE - len(data) % BLOCK_SIZE
    return bytes(BLOCK_SIZE) + bytes(data) + bytes([missing]) * missing


def unpad_pkcs7(data: bytes) -> bytes:
    if not data:
        raise ValueError("cannot unpad empty data")
    pad_len = data[-1]
    if pad_len > len(data):
        raise ValueError(f"padding length {pad_len} exceeds data length {len(data)}")
    return bytes(data[: len(data) - pad_len])


def symmetric_encrypt(key: bytes, data: bytes) -> bytes:
    """AES/CBC/PKCS7 with a random IV prepended, the IV itself encrypted with AES/ECB."""
    iv = os.urandom(BLOCK_SIZE)
    encrypted_iv = ecb_encrypt(key, iv)
    padded = pad_pkcs7_with_iv(data)
    body = _run(Cipher(algorithms.AES(bytes(key)), modes.CBC(iv)), padded[BLOCK_SIZE:], True)
    return encrypted_iv + body


def symmetric_decrypt(key: bytes, data: bytes) -> bytes:
    """Reverse :func:`symmetric_encrypt`."""
    if len(data) < BLOCK_SIZE:
        raise ValueError("ciphertext shorter than one block")
    _check_blocks(data)
    iv = ecb_decrypt(key, data[:BLOCK_SIZE])
    plain = _run(Cipher(algorithms.AES(bytes(key)), modes.CBC(iv)), bytes(data[BLOCK_SIZE:]), False)
    return unpad_pkcs7(plain)


def parse_asn1_rsa_public_key(der_bytes: bytes) -> rsa.RSAPublicKey:
    """Parse a DER encoded SubjectPublicKeyInfo holding an RSA key."""
    key = serialization.load_der_public_key(bytes(der_bytes))
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("not an RSA public key")
    return key


def rsa_encrypt(public_key: rsa.RSAPublicKey, message: bytes) -> bytes:
    """Encrypt with RSA-OAEP using SHA-1."""
    return public_key.encrypt(
        bytes(message),
        padding.OAEP(mgf=padding.MGF1(hashes.SHA1()), algorithm=hashes.SHA1(), label=None),
    )