"""Scoring oracles."""

from .base import ScoringOracle, score_sentence
from .lexicon import LexiconOracle, load_lexicon_oracle
from .null import NullOracle

__all__ = [
    "ScoringOracle",
    "score_sentence",
    "LexiconOracle",
    "load_lexicon_oracle",
    "NullOracle",
]
