import string
from typing import Optional, Sequence, Tuple

import numpy as np

ALPHABET = string.ascii_uppercase
M = len(ALPHABET)

# Base of the numbering system; also the length of every letter code.
BASE = 3

# Letter i is written as the three base-3 digits of i + 1, so (0, 0, 0) is never used.
TRIT_ALPHABET = np.array([
    [0, 0, 1], [0, 0, 2], [0, 1, 0], [0, 1, 1], [0, 1, 2],
    [0, 2, 0], [0, 2, 1], [0, 2, 2], [1, 0, 0], [1, 0, 1],
    [1, 0, 2], [1, 1, 0], [1, 1, 1], [1, 1, 2], [1, 2, 0],
    [1, 2, 1], [1, 2, 2], [2, 0, 0], [2, 0, 1], [2, 0, 2],
    [2, 1, 0], [2, 1, 1], [2, 1, 2], [2, 2, 0], [2, 2, 1],
    [2, 2, 2],
], dtype=np.int8)
TRIT_ALPHABET.flags.writeable = False


def letter_index(ch: str) -> Optional[int]:
    """
    Return the 0-based alphabet position of an ASCII letter (case-insensitive),
    or None for anything else. Non-ASCII letters such as 'é' are not letters here.
    """
    if len(ch) == 1 and ch in string.ascii_letters:
        return ALPHABET.index(ch.upper())
    return None


def index_letter(index: int) -> str:
    return ALPHABET[index]


def code_of(index: int) -> Tuple[int, int, int]:
    """Trit triple for the letter at `index` (0..25)."""
    if not 0 <= index < M:
        raise IndexError(f"Letter index {index} out of range 0..{M - 1}")
    a, b, c = (int(t) for t in TRIT_ALPHABET[index])
    return a, b, c


def index_of(triple: Sequence[int]) -> Optional[int]:
    """
    Reverse lookup: scan all 26 rows for one whose three trits equal `triple`.
    Returns None when no row matches (e.g. (0, 0, 0) or a corrupted run).
    """
    if len(triple) != BASE:
        return None
    matches = np.flatnonzero((TRIT_ALPHABET == np.asarray(triple)).all(axis=1))
    if matches.size == 0:
        return None
    return int(matches[0])


def add_codes(plain_index: int, key_index: int) -> Tuple[int, int, int]:
    """Per-position sum of two letter codes modulo BASE."""
    summed = (TRIT_ALPHABET[plain_index] + TRIT_ALPHABET[key_index]) % BASE
    a, b, c = (int(t) for t in summed)
    return a, b, c
