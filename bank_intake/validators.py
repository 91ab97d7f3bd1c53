"""Field validators for account-opening requests.

All checks are restricted to ASCII: ``str.isalpha`` and ``str.isdigit``
accept Unicode letters and digits, which the account rules do not.
"""

import string

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
EMAIL_USER_CHARS = LETTERS | DIGITS | {".", "_"}

ACCEPTED_DOMAINS = ("com", "edu")
IDENTIFIER_LENGTH = 10
MIN_NAME_LENGTH = 2
MIN_EMAIL_PART_LENGTH = 4


def valid_name(s: str) -> bool:
    """Return True if ``s`` has at least two characters, all ASCII letters."""
    return len(s) >= MIN_NAME_LENGTH and all(c in LETTERS for c in s)


def valid_identifier(s: str) -> bool:
    """Return True if ``s`` is exactly ten ASCII digits."""
    return len(s) == IDENTIFIER_LENGTH and all(c in DIGITS for c in s)


def split_email(e: str) -> tuple[str, str, str] | None:
    """Split an address into ``(user, host, domain)``.

    The first ``@`` separates user from host and the last ``.`` separates
    host from domain. Returns None when either separator is missing or the
    host would be empty.
    """
    at = e.find("@")
    dot = e.rfind(".")
    if at == -1 or dot == -1 or dot <= at + 1:
        return None
    return e[:at], e[at + 1 : dot], e[dot + 1 :]


def valid_email(e: str) -> bool:
    """Return True if ``e`` looks like ``user@host.com`` or ``user@host.edu``.

    - user: at least 4 characters from letters, digits, ``.`` and ``_``
    - host: at least 4 letters
    - domain: exactly ``com`` or ``edu``
    """
    parts = split_email(e)
    if parts is None:
        return False
    user, host, domain = parts

    if domain not in ACCEPTED_DOMAINS:
        return False
    if len(host) < MIN_EMAIL_PART_LENGTH or not all(c in LETTERS for c in host):
        return False
    if len(user) < MIN_EMAIL_PART_LENGTH or not all(c in EMAIL_USER_CHARS for c in user):
        return False
    return True


def email_domain(e: str) -> str:
    """Return the text after the last ``.`` of an address, or ``""``."""
    dot = e.rfind(".")
    return e[dot + 1 :] if dot != -1 else ""
