# core/utils/passwords.py
from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(password: str) -> str:
    """Salted, slow hash suitable for storing in user.password_hash."""
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Constant-time check of a claimed password against a stored hash."""
    if not password_hash or password is None:
        return False
    return check_password_hash(password_hash, password)
