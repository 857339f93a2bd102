"""Output formatting for tagged sentences."""

from typing import Optional, TextIO

from .models import SentenceResult, TagDistribution


def format_tagged_line(result: SentenceResult) -> str:
    """Format a sentence as space-separated ``surface/TAG`` pairs.

    Empty and failed sentences produce an empty line.
    """
    if result.failed:
        return ""
    return " ".join(f"{token.surface_form}/{token.tag}" for token in result.tokens)


def ranked_probabilities(
    distribution: TagDistribution, total: Optional[float] = None
) -> list[tuple[str, float]]:
    """Rank a pruned distribution by descending probability.

    Scores are divided by ``total``, the token's fused mass before pruning.
    Without it the pruned scores are renormalized among themselves.
    """
    if total is None:
        total = sum(distribution.values())
    if total <= 0:
        return []
    return sorted(
        ((tag, score / total) for tag, score in distribution.items()),
        key=lambda item: (-item[1], item[0]),
    )


def format_tag_probabilities(result: SentenceResult) -> str:
    """
    Format a sentence with one line per token listing its candidate tags.

    Each line reads ``surface<TAB>tag<TAB>prob...`` with tags ordered by
    descending probability. Probabilities are shares of the token's fused
    mass, so pruned tags are not redistributed. A blank line closes every
    sentence.

    Args:
        result: Tagged sentence with retained distributions

    Returns:
        Formatted block, ending with a newline
    """
    if result.failed or not result.tokens:
        return "\n"
    distributions = result.distributions or [{} for _ in result.tokens]
    totals = result.totals or [None for _ in result.tokens]
    lines = []
    for token, distribution, total in zip(result.tokens, distributions, totals):
        fields = [token.surface_form]
        for tag, prob in ranked_probabilities(distribution, total):
            fields.extend([tag, f"{prob:.6g}"])
        lines.append("\t".join(fields))
    return "\n".join(lines) + "\n\n"


def write_result(stream: TextIO, result: SentenceResult, tag_probs: bool = False) -> None:
    """Write one sentence result to a text stream."""
    if tag_probs:
        stream.write(format_tag_probabilities(result))
    else:
        stream.write(format_tagged_line(result) + "\n")
