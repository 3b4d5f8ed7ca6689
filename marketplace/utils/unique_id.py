"""
Unique ID generation for completed profiles
"""

import secrets
import string
import time
from typing import Callable, Optional

from marketplace.models.user import RoleId, BUSINESS_ROLES

SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
SUFFIX_LENGTH = 6
DEFAULT_BUSINESS_INITIALS = "BIZ"
MAX_CHOSEN_NUMBER = 9999


def random_suffix(length: int = SUFFIX_LENGTH) -> str:
    """Uppercase alphanumeric random string"""
    return ''.join(secrets.choice(SUFFIX_ALPHABET) for _ in range(length))


def timestamp_fragment(now_ms: Optional[int] = None) -> str:
    """Last 8 digits of the Unix millisecond clock"""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return str(now_ms)[-8:]


def business_unique_id(
    business_initials: Optional[str] = None,
    chosen_number: Optional[int] = None
) -> str:
    """
    Build an INITIALS-NUMBER-RANDOM identifier

    Args:
        business_initials: Initials, uppercased; "BIZ" when missing or empty
        chosen_number: Number in [0, 9999]; random when None

    Returns:
        e.g. "XY-0007-K3P9QZ"
    """
    initials = (business_initials or DEFAULT_BUSINESS_INITIALS).upper()

    if chosen_number is None:
        chosen_number = secrets.randbelow(MAX_CHOSEN_NUMBER + 1)
    elif not 0 <= chosen_number <= MAX_CHOSEN_NUMBER:
        raise ValueError(f"Chosen number must be between 0 and {MAX_CHOSEN_NUMBER}")

    return f"{initials}-{chosen_number:04d}-{random_suffix()}"


def role_unique_id(role: RoleId, now_ms: Optional[int] = None) -> str:
    """Build a ROLE-TIMESTAMP-RANDOM identifier, e.g. "CUSTOMER-53712044-AB12CD" """
    return f"{role.value.upper()}-{timestamp_fragment(now_ms)}-{random_suffix()}"


def generate_unique_id(
    role: RoleId,
    business_initials: Optional[str] = None,
    chosen_number: Optional[int] = None,
    exists: Optional[Callable[[str], bool]] = None,
    max_attempts: int = 5
) -> str:
    """
    Generate the role-scoped unique ID for a profile

    Args:
        role: Role being assigned
        business_initials: Only used for business roles
        chosen_number: Only used for business roles
        exists: Predicate reporting IDs already issued
        max_attempts: Generation attempts before giving up

    Returns:
        A unique ID not reported by ``exists``

    Raises:
        RuntimeError: If every attempt collided
    """
    for _ in range(max_attempts):
        if role in BUSINESS_ROLES:
            unique_id = business_unique_id(business_initials, chosen_number)
        else:
            unique_id = role_unique_id(role)

        if exists is None or not exists(unique_id):
            return unique_id

    raise RuntimeError(f"Could not generate a free unique ID for role {role.value}")
