"""Data models for the tagging pipeline."""

from dataclasses import dataclass, field
from typing import Optional, Union

# Per-token mapping of tag label to non-negative score
TagDistribution = dict[str, float]
# One TagDistribution per token, aligned with the sentence
SourceOutput = list[TagDistribution]


class Unresolved:
    """Marker for a token whose tag has not been decided yet."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED = Unresolved()


@dataclass(frozen=True)
class Tag:
    """A decided part-of-speech tag."""

    label: str

    def __str__(self) -> str:
        return self.label


Prediction = Union[Unresolved, Tag]


@dataclass
class Token:
    """A single word of a sentence."""

    surface_form: str
    normalized_form: str = ""
    prediction: Prediction = UNRESOLVED

    def __post_init__(self):
        if not self.normalized_form:
            self.normalized_form = self.surface_form

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.prediction, Tag)

    @property
    def tag(self) -> str:
        """Label of the predicted tag.

        Raises:
            ValueError: If the token has not been tagged yet
        """
        if not isinstance(self.prediction, Tag):
            raise ValueError(f"Token '{self.surface_form}' has no predicted tag")
        return self.prediction.label


@dataclass(frozen=True)
class FusedDistribution:
    """Combined scores for one token plus the total mass seen while fusing."""

    scores: TagDistribution
    total: float


@dataclass
class SentenceResult:
    """Result of tagging one sentence."""

    index: int
    tokens: list[Token]
    distributions: Optional[list[TagDistribution]] = None  # Pruned, per token
    totals: Optional[list[float]] = None  # Fused mass per token, before pruning
    truncated: bool = False
    original_length: int = 0
    error: Optional[str] = None
    state: str = "received"

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class RunSummary:
    """Counts reported at the end of a run."""

    sentences: int = 0
    tokens: int = 0
    truncated: int = 0
    failed: int = 0
    failed_indices: list[int] = field(default_factory=list)
