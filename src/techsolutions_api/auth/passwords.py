"""
techsolutions_api.auth.passwords

bcrypt password hashing.

`verify_password` never raises: a malformed stored hash is a failed check.
Both functions are CPU-bound by design (cost factor); async callers run them
in a worker thread.
"""

from __future__ import annotations

import bcrypt


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        # "Invalid salt" and friends: stored hash is not a bcrypt hash.
        return False


# Compared against when the email is unknown so both rejection paths cost the same.
DUMMY_HASH: str = hash_password("timing-equalization-placeholder")
