"""Ternary substitution cipher: letters as runs of three glyphs (▲ ▼ ◆)."""

from .alphabet import ALPHABET, BASE, TRIT_ALPHABET, code_of, index_of
from .analysis import glyph_run_frequencies, render_mapping_table
from .decoder import decode_static
from .encoders import (
    cipher_alphabet,
    encode,
    encode_keyed_additive,
    encode_keyed_permutation,
    encode_static,
    keyed_cipher_alphabet,
)
from .errors import InvalidKey, MalformedCiphertext, TritCipherError
from .glyphs import GLYPHS, SEPARATOR
from .keys import NO_KEY_SENTINEL, KeyMode, build_ordering, random_key, validate_key

__version__ = "1.0.0"
