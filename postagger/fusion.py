"""Additive fusion of per-token tag distributions from several sources."""

from typing import Iterable

from .models import FusedDistribution, SourceOutput, TagDistribution


def fuse(distributions: Iterable[TagDistribution]) -> FusedDistribution:
    """
    Merge the distributions of one token by summing scores on shared tags.

    Sources are consumed in the order given, and the tags of each source in
    ascending label order, so the floating-point summation order is the
    same on every run. ``total`` accumulates every score seen, including
    scores of tags that are later pruned.

    Args:
        distributions: Tag distributions for the same token, one per source

    Returns:
        FusedDistribution with the summed scores and the total mass
    """
    merged: TagDistribution = {}
    total = 0.0
    for distribution in distributions:
        for tag, score in sorted(distribution.items()):
            if tag in merged:
                merged[tag] += score
            else:
                merged[tag] = score
            total += score
    return FusedDistribution(scores=merged, total=total)


def fuse_sources(outputs: list[SourceOutput], length: int) -> list[FusedDistribution]:
    """Fuse position-aligned source outputs into one distribution per token.

    Args:
        outputs: Source outputs in fusion order, each of ``length`` entries
        length: Number of tokens in the sentence

    Returns:
        List of FusedDistribution, one per token
    """
    return [fuse(output[k] for output in outputs) for k in range(length)]
