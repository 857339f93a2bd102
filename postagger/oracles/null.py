"""Best-effort source that contributes nothing."""

from ..models import SourceOutput
from .base import ScoringOracle


class NullOracle(ScoringOracle):
    """Secondary source stand-in returning an empty distribution per word."""

    name = "null"

    def score(self, words: list[str]) -> SourceOutput:
        return [{} for _ in words]
