"""
Utilitários de criptografia: hash de senha dos funcionários e tokens JWE de sessão.
"""
import base64
import json
import os
import time

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt
from jwcrypto import jwe, jwk

from .config import settings

_SCRYPT_N = 2 ** 14
_SCRYPT_R = 8
_SCRYPT_P = 1


def _scrypt(salt: bytes) -> Scrypt:
    return Scrypt(salt=salt, length=32, n=_SCRYPT_N, r=_SCRYPT_R, p=_SCRYPT_P)


def hash_password(plaintext: str) -> str:
    salt = os.urandom(16)
    digest = _scrypt(salt).derive(plaintext.encode())
    return f"{base64.b64encode(salt).decode()}${base64.b64encode(digest).decode()}"


def verify_password(plaintext: str, stored: str) -> bool:
    try:
        salt_b64, digest_b64 = stored.split("$", 1)
        _scrypt(base64.b64decode(salt_b64)).verify(plaintext.encode(), base64.b64decode(digest_b64))
        return True
    except (ValueError, InvalidKey):
        return False


def _get_jwk_key() -> jwk.JWK:
    """Decode JWE_SECRET_KEY and return a JWK symmetric key."""
    if not settings.JWE_SECRET_KEY:
        raise RuntimeError("JWE_SECRET_KEY não configurado")
    key_bytes = base64.urlsafe_b64decode(settings.JWE_SECRET_KEY)
    if len(key_bytes) != 32:
        raise ValueError(f"JWE_SECRET_KEY must be 32 bytes, got {len(key_bytes)}")
    return jwk.JWK(kty="oct", k=base64.urlsafe_b64encode(key_bytes).decode().rstrip("="))


def encrypt_payload(payload: dict) -> str:
    """Encrypt a dict payload into a compact JWE token."""
    key = _get_jwk_key()
    jwe_token = jwe.JWE(
        json.dumps(payload).encode("utf-8"),
        protected=json.dumps({"alg": "dir", "enc": "A256GCM"}),
        recipient=key,
    )
    return jwe_token.serialize(compact=True)


def decrypt_token(token: str) -> dict:
    """Decrypt a compact JWE token and return the payload dict."""
    key = _get_jwk_key()
    jwe_token = jwe.JWE()
    jwe_token.deserialize(token, key)
    return json.loads(jwe_token.payload.decode("utf-8"))


def emitir_token_funcionario(employee_id: int, employee_name: str) -> tuple[str, int]:
    """Gera o token de sessão de um funcionário. Retorna (token, expira_em)."""
    now = int(time.time())
    exp = now + settings.JWE_TOKEN_TTL
    token = encrypt_payload({
        "sub": employee_id,
        "name": employee_name,
        "iat": now,
        "exp": exp,
    })
    return token, exp
