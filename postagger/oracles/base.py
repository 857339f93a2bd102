"""Base class for scoring oracles and the adapter that calls them."""

from abc import ABC, abstractmethod

from ..errors import OracleContractViolation
from ..models import SourceOutput


class ScoringOracle(ABC):
    """Base class for per-sentence tag distribution sources."""

    name = "oracle"

    @property
    def available(self) -> bool:
        """Whether the oracle's model was loaded and can be used."""
        return True

    @abstractmethod
    def score(self, words: list[str]) -> SourceOutput:
        """Score every word of a sentence.

        Args:
            words: Normalized words of a non-empty sentence

        Returns:
            One tag -> score mapping per word, in the same order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def score_sentence(oracle: ScoringOracle, words: list[str]) -> SourceOutput:
    """
    Call an oracle for one sentence and check its output alignment.

    An empty sentence returns an empty result without calling the oracle.

    Args:
        oracle: Scoring oracle
        words: Normalized, length-guarded words

    Returns:
        One distribution per word

    Raises:
        OracleContractViolation: If the oracle output length differs from
            the sentence length
    """
    if not words:
        return []
    output = oracle.score(words)
    if output is None or len(output) != len(words):
        actual = 0 if output is None else len(output)
        raise OracleContractViolation(oracle.name, len(words), actual)
    return output
