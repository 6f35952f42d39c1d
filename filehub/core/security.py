# filehub/core/security.py
from itsdangerous import BadSignature, URLSafeSerializer

SESSION_COOKIE = "user_id"


def _serializer(secret_key: str) -> URLSafeSerializer:
    return URLSafeSerializer(secret_key, salt="filehub-session")


def sign_user_id(user_id: int, secret_key: str) -> str:
    return _serializer(secret_key).dumps(user_id)


def read_user_id(token: str, secret_key: str) -> int | None:
    """Return the user id from a signed cookie value, or None if it was tampered with."""
    try:
        user_id = _serializer(secret_key).loads(token)
    except (BadSignature, ValueError):
        return None
    return user_id if isinstance(user_id, int) else None
