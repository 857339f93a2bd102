"""Low-probability pruning and MAP tag selection."""

from .models import FusedDistribution, Tag, TagDistribution, Token

DEFAULT_PRUNE_THRESHOLD = 0.001
UNKNOWN_TAG = "unknown"


def prune(scores: TagDistribution, total: float, relative_threshold: float) -> TagDistribution:
    """Keep tags whose score is at least ``relative_threshold * total``.

    Returns:
        Surviving tags in ascending label order; empty when ``total`` is zero
    """
    if total <= 0:
        return {}
    threshold = relative_threshold * total
    return {tag: scores[tag] for tag in sorted(scores) if scores[tag] >= threshold}


def select_best(pruned: TagDistribution, unknown_tag: str = UNKNOWN_TAG) -> str:
    """Return the tag with the strictly greatest score.

    Tags are visited in ascending label order, so among equal maxima the
    lexicographically smallest label wins.
    """
    best_tag = unknown_tag
    best_score = -1.0
    for tag in sorted(pruned):
        if pruned[tag] > best_score:
            best_score = pruned[tag]
            best_tag = tag
    return best_tag


def decide(
    fused: FusedDistribution,
    relative_threshold: float = DEFAULT_PRUNE_THRESHOLD,
    unknown_tag: str = UNKNOWN_TAG,
) -> tuple[TagDistribution, str]:
    """
    Prune a fused distribution and pick its MAP tag.

    Args:
        fused: Fused scores and total mass for one token
        relative_threshold: Fraction of the total mass a tag needs to survive
        unknown_tag: Tag returned when nothing survives (zero mass)

    Returns:
        Tuple of (pruned distribution, best tag)
    """
    pruned = prune(fused.scores, fused.total, relative_threshold)
    return pruned, select_best(pruned, unknown_tag)


def decide_token(
    token: Token,
    fused: FusedDistribution,
    relative_threshold: float = DEFAULT_PRUNE_THRESHOLD,
    unknown_tag: str = UNKNOWN_TAG,
) -> TagDistribution:
    """Decide a token's tag in place and return its pruned distribution.

    Raises:
        ValueError: If the token already carries a tag
    """
    if token.is_resolved:
        raise ValueError(f"Token '{token.surface_form}' is already tagged")
    pruned, best = decide(fused, relative_threshold, unknown_tag)
    token.prediction = Tag(best)
    return pruned
