import logging
import string
from enum import Enum

from Crypto.Random import random

from .alphabet import ALPHABET, M

logger = logging.getLogger(__name__)

# Caller-side convention meaning "no key, use the static table".
NO_KEY_SENTINEL = "0"


class KeyMode(Enum):
    PERMUTATION = "permutation"
    ADDITIVE = "additive"


def validate_key(key: str, mode: KeyMode) -> bool:
    """
    Check a keyword for the given mode.

    Both modes reject an empty key and any character that is not an ASCII letter.
    Permutation keys seed an alphabet ordering, so their letters must also be
    unique (case-insensitive). Additive keys are cycled, so repeats are fine.
    """
    if not key:
        return False
    if not all(ch in string.ascii_letters for ch in key):
        return False
    if mode is KeyMode.PERMUTATION:
        upper = key.upper()
        return len(set(upper)) == len(upper)
    return True


def build_ordering(keyword: str) -> str:
    """
    Keyed alphabet: keyword letters first (uppercased, first occurrence only),
    then the remaining letters of A-Z in their normal order.
    The result is always a 26-letter permutation of A-Z.
    """
    remaining = list(ALPHABET)
    ordering = []
    for ch in keyword.upper():
        # a repeated letter was already removed, so it is skipped here
        if ch in remaining:
            remaining.remove(ch)
            ordering.append(ch)
    ordering.extend(remaining)
    result = "".join(ordering)
    logger.debug("Keyed alphabet for %r: %s", keyword, result)
    return result


def random_key(length: int, mode: KeyMode = KeyMode.PERMUTATION) -> str:
    """
    Generate a random key that passes validate_key for `mode`.
    Permutation keys draw letters without replacement, so length is capped at 26.
    """
    if length < 1:
        raise ValueError("Key length must be > 0")
    if mode is KeyMode.PERMUTATION:
        if length > M:
            raise ValueError(f"Permutation key length must be <= {M}")
        return "".join(random.sample(ALPHABET, length))
    return "".join(random.choice(ALPHABET) for _ in range(length))
