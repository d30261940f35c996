"""Random password generation."""

from __future__ import annotations

import secrets

DEFAULT_LENGTH = 12
MIN_GENERATED_LENGTH = 4
LOWER_CHARSET = "abcdefghijklmnopqrstuvwxyz"
UPPER_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBER_CHARSET = "0123456789"
SPECIAL_CHARSET = "!@#$%^&*=+"


def ensure_char_type(password: str, charset: str, position: int) -> str:
    """Return ``password`` with a random character from ``charset`` at ``position``.

    An empty password or a position past the end leaves it unchanged.
    """
    if not password or position >= len(password):
        return password
    if position < 0:
        raise IndexError(f"position {position} out of range")
    return password[:position] + secrets.choice(charset) + password[position + 1:]


def generate_password(length: int) -> str:
    """Generate a random password of ``length`` characters (at least 4).

    It starts with a lowercase letter, an uppercase letter and a digit, and
    ends with a special character.
    """
    length = max(length, MIN_GENERATED_LENGTH)
    charset = LOWER_CHARSET + UPPER_CHARSET + NUMBER_CHARSET
    body = "".join(secrets.choice(charset) for _ in range(length - 1))
    body = ensure_char_type(body, LOWER_CHARSET, 0)
    body = ensure_char_type(body, UPPER_CHARSET, 1)
    body = ensure_char_type(body, NUMBER_CHARSET, 2)
    return body + secrets.choice(SPECIAL_CHARSET)