"""Input validation helpers."""

import re

# local part, "@", domain, ".", suffix; none of them may hold whitespace or "@".
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: object) -> bool:
    """Return whether ``value`` looks like an email address.

    Only strings are accepted; surrounding whitespace is ignored. This is a
    deliberately loose syntactic check and not RFC 5322 validation: addresses
    such as ``a@b.c`` pass while quoted local parts or addresses without a dot
    in the domain are rejected.
    """

    if not isinstance(value, str):
        return False
    return _EMAIL_PATTERN.fullmatch(value.strip()) is not None
