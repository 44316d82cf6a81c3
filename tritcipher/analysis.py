from collections import Counter
from typing import List

from .alphabet import ALPHABET, BASE
from .glyphs import is_glyph_run


def glyph_run_frequencies(ciphertext: str) -> Counter:
    """
    Count the glyph runs in a ciphertext, ignoring separators and literals.
    Static and keyed-permutation output keep the plaintext letter frequencies;
    keyed-additive output spreads them across several runs.
    """
    counts = Counter()
    i = 0
    while i < len(ciphertext):
        run = ciphertext[i:i + BASE]
        if is_glyph_run(run):
            counts[run] += 1
            i += BASE
        else:
            i += 1
    return counts


def render_mapping_table(table: List[str]) -> str:
    """
    Two-row table of the key mapping:
    first row the plain letters (A-Z), then a border, then the glyph runs.
    """
    col_width = BASE
    plain_row = " " + " ".join(letter.center(col_width) for letter in ALPHABET) + " "
    border = " " + "+".join(["-" * col_width] * len(ALPHABET)) + " "
    cipher_row = " " + " ".join(run.center(col_width) for run in table) + " "
    return "\n".join([plain_row, border, cipher_row])
