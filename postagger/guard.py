"""Sentence length guard."""

import logging

from .models import Token

logger = logging.getLogger(__name__)

DEFAULT_MAX_SENTENCE_LENGTH = 990


def guard_sentence(
    tokens: list[Token], max_length: int = DEFAULT_MAX_SENTENCE_LENGTH
) -> tuple[list[Token], bool]:
    """Truncate a sentence that is longer than ``max_length``.

    Oversized sentences are cut to their leading ``max_length`` tokens and a
    warning is logged. This never raises.

    Args:
        tokens: Sentence tokens in reading order
        max_length: Maximum number of tokens passed to the scoring oracles

    Returns:
        Tuple of (tokens to score, whether truncation happened)
    """
    if len(tokens) <= max_length:
        return tokens, False

    logger.warning(
        f"Sentence is too long ({len(tokens)} tokens); "
        f"truncated to {max_length} tokens"
    )
    return tokens[:max_length], True
