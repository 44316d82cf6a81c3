class TritCipherError(ValueError):
    """Base class for every error raised by the trit cipher."""


class InvalidKey(TritCipherError):
    """Key failed validation for the requested mode."""

    def __init__(self, key: str, mode):
        self.key = key
        self.mode = mode
        super().__init__(f"Invalid {mode.value} key: {key!r}")


class MalformedCiphertext(TritCipherError):
    """A glyph run in the ciphertext does not match any letter."""

    def __init__(self, run: str, position: int):
        self.run = run
        self.position = position
        super().__init__(f"Glyph run {run!r} at position {position} is not a letter code")
