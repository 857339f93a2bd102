"""Exceptions raised by the tagging pipeline."""


class TaggerError(Exception):
    """Base class for tagger errors."""


class FatalModelError(TaggerError, RuntimeError):
    """The model could not be loaded or is unavailable; nothing can be tagged."""


class OracleContractViolation(TaggerError, ValueError):
    """A scoring oracle returned output not aligned with its input sentence."""

    def __init__(self, oracle_name: str, expected: int, actual: int):
        self.oracle_name = oracle_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Oracle '{oracle_name}' returned {actual} distributions "
            f"for a sentence of {expected} tokens"
        )
