import secrets

from fastapi.security import HTTPBearer

bearer_scheme = HTTPBearer(auto_error=False)

TOKEN_BYTES = 16


def generate_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


def credentials_match(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))
