import logging
from typing import List, Optional

from .alphabet import ALPHABET, M, add_codes, code_of, letter_index
from .errors import InvalidKey, TritCipherError
from .glyphs import SEPARATOR, to_glyph_run
from .keys import NO_KEY_SENTINEL, KeyMode, build_ordering, validate_key

logger = logging.getLogger(__name__)


# --- Cipher alphabets (letter index -> glyph run) ---

def cipher_alphabet() -> List[str]:
    """The 26 static glyph runs, A first."""
    return [to_glyph_run(code_of(i)) for i in range(M)]


def keyed_cipher_alphabet(ordering: str) -> List[str]:
    """
    Shuffle the static glyph runs according to a keyed alphabet ordering:
    the i-th letter of `ordering` receives the run the static table gives
    to the i-th plain letter. Trit values themselves are unchanged.
    """
    if sorted(ordering) != list(ALPHABET):
        raise TritCipherError(f"Ordering must be a permutation of A-Z: {ordering!r}")
    static = cipher_alphabet()
    table = [""] * M
    for i, letter in enumerate(ordering):
        table[ALPHABET.index(letter)] = static[i]
    return table


def _substitute(plaintext: str, table: List[str]) -> str:
    result = []
    for ch in plaintext:
        idx = letter_index(ch)
        if idx is not None:
            result.append(table[idx])
        elif ch == " ":
            result.append(SEPARATOR)
        else:
            result.append(ch)
    return "".join(result)


# --- 1. Static ---

def encode_static(plaintext: str) -> str:
    """
    Unkeyed encoding. Letters become their fixed 3-glyph run, spaces become '/',
    everything else (digits, punctuation, newlines) is copied unchanged.
    """
    return _substitute(plaintext, cipher_alphabet())


# --- 2. Keyed permutation ---

def encode_keyed_permutation(plaintext: str, key: str) -> str:
    """
    Monoalphabetic encoding with a keyword-shuffled table.
    The key must be non-empty, letters only, with no repeated letter.
    """
    if not validate_key(key, KeyMode.PERMUTATION):
        raise InvalidKey(key, KeyMode.PERMUTATION)
    return _substitute(plaintext, keyed_cipher_alphabet(build_ordering(key)))


# --- 3. Keyed additive ---

def encode_keyed_additive(plaintext: str, key: str) -> str:
    """
    Polyalphabetic encoding. The k-th letter of the plaintext is combined with
    key[k % len(key)] by adding their trit codes position-wise modulo 3.
    Non-letters are copied (space -> '/') and do not advance k.

    There is no matching decoder: the output cannot be reversed by table lookup.
    """
    if not validate_key(key, KeyMode.ADDITIVE):
        raise InvalidKey(key, KeyMode.ADDITIVE)
    key_indices = [ALPHABET.index(k) for k in key.upper()]
    result = []
    j = 0
    for ch in plaintext:
        idx = letter_index(ch)
        if idx is not None:
            shift = key_indices[j % len(key_indices)]
            logger.debug("letter %s + key %s", ALPHABET[idx], ALPHABET[shift])
            result.append(to_glyph_run(add_codes(idx, shift)))
            j += 1
        elif ch == " ":
            result.append(SEPARATOR)
        else:
            result.append(ch)
    return "".join(result)


def encode(plaintext: str, key: Optional[str] = None, mode: KeyMode = KeyMode.ADDITIVE) -> str:
    """
    Pick an encoder the way the interactive front end does: no key or the
    sentinel "0" means static, otherwise `mode` selects the keyed variant.
    """
    if key is None or key == NO_KEY_SENTINEL:
        logger.info("Encoding with the static table")
        return encode_static(plaintext)
    logger.info("Encoding with %s key", mode.value)
    if mode is KeyMode.PERMUTATION:
        return encode_keyed_permutation(plaintext, key)
    return encode_keyed_additive(plaintext, key)
