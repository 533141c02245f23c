"""Password hashing and strength rules."""

import re

import bcrypt

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 50

# At least one digit, one uppercase, one lowercase, one special character, no whitespace
PASSWORD_PATTERN = re.compile(r"^(?=.*\d)(?=.*[A-Z])(?=.*[a-z])(?=.*[^\w\d\s:])([^\s])+$")

PASSWORD_RULES_MESSAGE = (
    "Password must be at least 8 characters, contain at least one number, "
    "one uppercase letter, one lowercase letter, and one special character"
)


def password_problem(password: str) -> str | None:
    """Return a message describing why a password is too weak, or None."""
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    # bcrypt only accepts 72 bytes
    if len(password) > PASSWORD_MAX_LENGTH or len(password.encode("utf-8")) > 72:
        return f"Password must be less than {PASSWORD_MAX_LENGTH} characters long"
    if not PASSWORD_PATTERN.match(password):
        return PASSWORD_RULES_MESSAGE
    return None


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in storage
        return False
