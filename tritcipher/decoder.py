import logging

from .alphabet import BASE, index_letter, index_of
from .errors import MalformedCiphertext
from .glyphs import SEPARATOR, from_glyph_run, is_glyph_run

logger = logging.getLogger(__name__)


def decode_static(ciphertext: str, strict: bool = False) -> str:
    """
    Reverse encode_static.

    The text is scanned left to right. '/' becomes a space. When the next three
    characters form a glyph run found in the code table, the letter is emitted
    (uppercase) and the scan moves past the run. Anything else is copied one
    character at a time.

    A glyph run that is not a letter code, such as '▲▲▲', is copied through
    as literal characters unless `strict` is set, in which case
    MalformedCiphertext is raised.

    Only static ciphertext decodes correctly; keyed output gives wrong letters.
    """
    result = []
    i = 0
    n = len(ciphertext)
    while i < n:
        ch = ciphertext[i]
        if ch == SEPARATOR:
            result.append(" ")
            i += 1
            continue
        run = ciphertext[i:i + BASE]
        if is_glyph_run(run):
            idx = index_of(from_glyph_run(run))
            if idx is not None:
                result.append(index_letter(idx))
                i += BASE
                continue
            if strict:
                raise MalformedCiphertext(run, i)
            logger.warning("Glyph run %r at position %d is not a letter code; copying", run, i)
        result.append(ch)
        i += 1
    return "".join(result)
