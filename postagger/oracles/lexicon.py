"""Lexicon-backed scoring oracle."""

import csv
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from ..errors import FatalModelError
from ..models import SourceOutput, TagDistribution
from .base import ScoringOracle

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("word", "tag", "count")


class LexiconOracle(ScoringOracle):
    """Score words by their relative tag frequencies in a lexicon.

    Words missing from the lexicon fall back to their lowercase form, then to
    the tag prior computed over the whole lexicon. The oracle holds no mutable
    state after construction.
    """

    def __init__(
        self,
        lexicon: dict[str, TagDistribution],
        prior: TagDistribution,
        name: str = "lexicon",
        lowercase_fallback: bool = True,
    ):
        """Initialize lexicon oracle.

        Args:
            lexicon: word -> (tag -> probability)
            prior: tag -> probability used for unknown words
            name: Name reported in logs and errors
            lowercase_fallback: Look up the lowercase form of unknown words
        """
        self.lexicon = lexicon
        self.prior = prior
        self.name = name
        self.lowercase_fallback = lowercase_fallback

    @property
    def available(self) -> bool:
        return bool(self.prior)

    def lookup(self, word: str) -> TagDistribution:
        """Return the tag distribution for a single word."""
        if word in self.lexicon:
            return dict(self.lexicon[word])
        if self.lowercase_fallback:
            lowered = word.lower()
            if lowered in self.lexicon:
                return dict(self.lexicon[lowered])
        return dict(self.prior)

    def score(self, words: list[str]) -> SourceOutput:
        return [self.lookup(word) for word in words]

    @classmethod
    def from_frame(
        cls, df: pd.DataFrame, name: str = "lexicon", lowercase_fallback: bool = True
    ) -> "LexiconOracle":
        """Build an oracle from a DataFrame with word, tag and count columns.

        Raises:
            FatalModelError: If columns are missing or no usable counts exist
        """
        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise FatalModelError(
                f"Lexicon '{name}' is missing columns: {', '.join(missing)}"
            )

        df = df.dropna(subset=list(REQUIRED_COLUMNS))
        df = df[df["count"] > 0]
        if df.empty:
            raise FatalModelError(f"Lexicon '{name}' contains no positive counts")

        counts = df.groupby(["word", "tag"], sort=True)["count"].sum()
        word_totals = counts.groupby(level="word").sum()
        lexicon: dict[str, TagDistribution] = {}
        for (word, tag), count in counts.items():
            lexicon.setdefault(str(word), {})[str(tag)] = float(count / word_totals[word])

        tag_counts = df.groupby("tag", sort=True)["count"].sum()
        grand_total = float(tag_counts.sum())
        prior = {str(tag): float(count) / grand_total for tag, count in tag_counts.items()}

        return cls(lexicon, prior, name=name, lowercase_fallback=lowercase_fallback)


def load_lexicon_oracle(
    path: Path, name: Optional[str] = None, lowercase_fallback: bool = True
) -> LexiconOracle:
    """
    Load a tab-separated lexicon file into a LexiconOracle.

    Args:
        path: Path to a TSV file with ``word``, ``tag`` and ``count`` columns
        name: Oracle name (defaults to the file stem)
        lowercase_fallback: Look up the lowercase form of unknown words

    Returns:
        Loaded oracle

    Raises:
        FatalModelError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    name = name or path.stem
    if not path.exists():
        raise FatalModelError(f"Model file not found: {path}")

    logger.info(f"Loading lexicon model '{name}' from: {path}")
    try:
        df = pd.read_csv(
            path,
            sep="\t",
            dtype={"word": str, "tag": str},
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,  # words may contain quotes
            encoding="utf-8",
        )
    except (OSError, ValueError, pd.errors.ParserError) as e:
        raise FatalModelError(f"Failed to read model file {path}: {e}") from e

    if "count" in df.columns:
        df["count"] = pd.to_numeric(df["count"], errors="coerce")
    oracle = LexiconOracle.from_frame(df, name=name, lowercase_fallback=lowercase_fallback)
    logger.info(
        f"Loaded {len(oracle.lexicon)} words and {len(oracle.prior)} tags for '{name}'"
    )
    return oracle
