"""Symbol normalization applied to tokens before scoring."""

import logging
from typing import Literal

from .models import Token

logger = logging.getLogger(__name__)

BracketStyle = Literal["pos", "ptb"]


class BracketConverter:
    """Convert between Penn Treebank bracket escapes and literal brackets."""

    # Penn Treebank escape -> literal bracket
    PTB_TO_POS = {
        "-LRB-": "(",
        "-RRB-": ")",
        "-LSB-": "[",
        "-RSB-": "]",
        "-LCB-": "{",
        "-RCB-": "}",
    }
    POS_TO_PTB = {v: k for k, v in PTB_TO_POS.items()}

    @classmethod
    def ptb_to_pos(cls, text: str) -> str:
        """Map a PTB escape such as ``-LRB-`` to its literal bracket.

        Args:
            text: Token text

        Returns:
            The literal bracket, or the input unchanged
        """
        return cls.PTB_TO_POS.get(text, text)

    @classmethod
    def pos_to_ptb(cls, text: str) -> str:
        """Map a literal bracket to its PTB escape."""
        return cls.POS_TO_PTB.get(text, text)


def normalize(text: str, style: BracketStyle = "pos") -> str:
    """
    Return the scoring-time form of a token.

    Args:
        text: Raw token text
        style: ``"pos"`` collapses PTB escapes to literal brackets,
            ``"ptb"`` collapses literal brackets to PTB escapes

    Returns:
        Normalized text; unknown input passes through unchanged
    """
    if style == "ptb":
        return BracketConverter.pos_to_ptb(text)
    return BracketConverter.ptb_to_pos(text)


def normalize_sentence(tokens: list[Token], style: BracketStyle = "pos") -> list[Token]:
    """Set ``normalized_form`` on every token, leaving ``surface_form`` intact."""
    for token in tokens:
        token.normalized_form = normalize(token.surface_form, style)
        if token.normalized_form != token.surface_form:
            logger.debug(f"Normalized '{token.surface_form}' -> '{token.normalized_form}'")
    return tokens
