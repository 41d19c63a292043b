import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from steamnet.cryptoutil import (
    ecb_decrypt,
    ecb_encrypt,
    pad_pkcs7_with_iv,
    parse_asn1_rsa_public_key,
    rsa_encrypt,
    symmetric_decrypt,
    symmetric_encrypt,
    unpad_pkcs7,
)

KEY = b"hunter2         "


@pytest.fixture(scope="module")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def test_crypt():
    src = b"Hello World!"
    encrypted = symmetric_encrypt(KEY, src)
    assert len(encrypted) % 16 == 0
    decrypted = symmetric_decrypt(KEY, encrypted)
    assert len(decrypted) == len(b"Hello World!")
    assert decrypted == src


def test_crypt_uses_random_iv():
    first = symmetric_encrypt(KEY, b"same")
    second = symmetric_encrypt(KEY, b"same")
    assert len(first) == len(second) == 32
    assert first[:16] != second[:16]
    assert symmetric_decrypt(KEY, first) == b"same"
    assert symmetric_decrypt(KEY, second) == b"same"


def test_crypt_32_byte_key():
    session_key = bytes(range(32))
    assert symmetric_decrypt(session_key, symmetric_encrypt(session_key, b"x" * 40)) == b"x" * 40


def test_decrypt_rejects_partial_blocks():
    with pytest.raises(ValueError):
        symmetric_decrypt(KEY, b"short")


def test_pkcs7_pad():
    out = pad_pkcs7_with_iv(b"123456789012345678901234567890")
    assert len(out) == 32 + 16
    assert out[47] == 2


def test_pkcs7_unpad():
    out = unpad_pkcs7(bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 4, 4, 4, 4]))
    assert len(out) == 12
    assert out[7] == 8


def test_unpad_empty():
    with pytest.raises(ValueError):
        unpad_pkcs7(b"")


def test_ecb_round_trip():
    block = bytes(range(32))
    encrypted = ecb_encrypt(KEY, block)
    assert len(encrypted) == 32
    assert encrypted[:16] != encrypted[16:]
    assert ecb_decrypt(KEY, encrypted) == block


def test_ecb_rejects_partial_block():
    with pytest.raises(ValueError):
        ecb_encrypt(KEY, b"abc")


def test_rsa_round_trip(private_key):
    der = private_key.public_key().public_bytes(
        serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo
    )
    public_key = parse_asn1_rsa_public_key(der)
    session_key = bytes(range(32))
    ciphertext = rsa_encrypt(public_key, session_key)
    plain = private_key.decrypt(
        ciphertext,
        padding.OAEP(mgf=padding.MGF1(hashes.SHA1()), algorithm=hashes.SHA1(), label=None),
    )
    assert plain == session_key


def test_parse_rejects_non_rsa():
    der = ec.generate_private_key(ec.SECP256R1()).public_key().public_bytes(
        serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo
    )
    with pytest.raises(ValueError, match="not an RSA public key"):
        parse_asn1_rsa_public_key(der)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_asn1_rsa_public_key(b"not der at all")