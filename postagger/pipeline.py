"""Main tagging pipeline."""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from tqdm import tqdm

from .config import Config
from .decision import decide_token
from .errors import FatalModelError
from .fusion import fuse_sources
from .guard import guard_sentence
from .models import RunSummary, SentenceResult, Token
from .normalizer import normalize_sentence
from .oracles import NullOracle, ScoringOracle, load_lexicon_oracle, score_sentence
from .writer import write_result

logger = logging.getLogger(__name__)


def split_words(line: str) -> list[str]:
    """Split a pre-tokenized line on whitespace."""
    return line.split()


def build_oracles(config: Config) -> list[ScoringOracle]:
    """
    Create the scoring oracles named by the configuration.

    The primary oracle always comes first; the secondary source is appended
    only when enabled. The returned order is the fusion order.

    Args:
        config: Pipeline configuration

    Returns:
        List of oracles in fusion order

    Raises:
        FatalModelError: If the primary model is not configured or fails to load
    """
    if config.model.path is None:
        raise FatalModelError("No model specified (use --model or model.path)")

    oracles: list[ScoringOracle] = [
        load_lexicon_oracle(
            config.model.path,
            name="primary",
            lowercase_fallback=config.model.lowercase_fallback,
        )
    ]

    if config.tagging.enable_secondary_source:
        if config.model.secondary_path is None:
            logger.warning("Secondary source enabled but no secondary model given; it will contribute nothing")
            oracles.append(NullOracle())
        else:
            oracles.append(
                load_lexicon_oracle(
                    config.model.secondary_path,
                    name="secondary",
                    lowercase_fallback=config.model.lowercase_fallback,
                )
            )
    return oracles


@contextmanager
def _open_input(path: Optional[Path]) -> Iterator[TextIO]:
    if path is None:
        yield sys.stdin
    else:
        with open(path, "r", encoding="utf-8") as f:
            yield f


@contextmanager
def _open_output(path: Optional[Path]) -> Iterator[TextIO]:
    if path is None:
        yield sys.stdout
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yield f


class TaggingPipeline:
    """Pipeline that tags sentences by fusing scoring oracle outputs."""

    def __init__(self, config: Config, oracles: list[ScoringOracle]):
        """Initialize tagging pipeline.

        Args:
            config: Pipeline configuration
            oracles: Scoring oracles in fusion order; the first is the primary

        Raises:
            FatalModelError: If no oracle is given or one is unavailable
        """
        if not oracles:
            raise FatalModelError("At least one scoring oracle is required")
        unavailable = [oracle.name for oracle in oracles if not oracle.available]
        if unavailable:
            raise FatalModelError(f"Model unavailable for oracle(s): {', '.join(unavailable)}")

        self.config = config
        self.oracles = list(oracles)

    @classmethod
    def from_config(cls, config: Config) -> "TaggingPipeline":
        """Build a pipeline and load its oracles from configuration."""
        return cls(config, build_oracles(config))

    def process_sentence(self, tokens: list[Token], index: int = 0) -> SentenceResult:
        """
        Tag a single sentence.

        Args:
            tokens: Sentence tokens in reading order
            index: Position of the sentence in its batch

        Returns:
            SentenceResult with decided tokens

        Raises:
            OracleContractViolation: If an oracle output is misaligned
        """
        tagging = self.config.tagging
        result = SentenceResult(index=index, tokens=tokens, original_length=len(tokens))

        if not tokens:
            if self.config.output.output_tag_probs:
                result.distributions = []
                result.totals = []
            result.state = "emitted"
            return result

        normalize_sentence(tokens, tagging.bracket_style)
        result.state = "normalized"

        tokens, result.truncated = guard_sentence(tokens, tagging.max_sentence_length)
        result.tokens = tokens
        result.state = "guarded"

        words = [token.normalized_form for token in tokens]
        outputs = [score_sentence(oracle, words) for oracle in self.oracles]
        result.state = "scored"

        fused = fuse_sources(outputs, len(tokens))
        result.state = "fused"

        distributions = [
            decide_token(
                token,
                fused_token,
                tagging.probability_prune_threshold,
                tagging.unknown_tag,
            )
            for token, fused_token in zip(tokens, fused)
        ]
        result.state = "decided"

        if self.config.output.output_tag_probs:
            result.distributions = distributions
            result.totals = [fused_token.total for fused_token in fused]
        result.state = "emitted"
        return result

    def tag_words(self, words: list[str], index: int = 0) -> SentenceResult:
        """Tag a sentence given as a list of words."""
        return self.process_sentence([Token(surface_form=word) for word in words], index)

    def _process_guarded(self, words: list[str], index: int) -> SentenceResult:
        """Tag one sentence, recording its failure instead of raising.

        FatalModelError still aborts the run.
        """
        try:
            return self.tag_words(words, index)
        except FatalModelError:
            raise
        except Exception as e:
            logger.error(f"Sentence {index + 1} failed: {type(e).__name__}: {e}")
            return SentenceResult(
                index=index,
                tokens=[Token(surface_form=word) for word in words],
                original_length=len(words),
                error=str(e),
            )

    def process_batch(self, sentences: list[list[str]]) -> list[SentenceResult]:
        """
        Tag an ordered batch of sentences.

        Sentences are processed one after another and results keep input
        order. A sentence that raises fails alone; FatalModelError aborts the batch.

        Args:
            sentences: Sentences as lists of words

        Returns:
            One SentenceResult per input sentence
        """
        return [
            self._process_guarded(words, index)
            for index, words in enumerate(
                tqdm(
                    sentences,
                    desc="Tagging",
                    disable=not self.config.output.show_progress,
                )
            )
        ]

    def run(self) -> RunSummary:
        """Read the configured input, tag it and write the output.

        Returns:
            RunSummary with sentence, token, truncation and failure counts
        """
        input_file = self.config.input_file
        if input_file is not None and not input_file.exists():
            raise FileNotFoundError(f"Input file not found: {input_file}")

        logger.info(f"Reading from: {input_file or '<stdin>'}")
        with _open_input(input_file) as stream:
            sentences = [split_words(line) for line in stream]
        logger.info(f"Read {len(sentences)} sentences")

        results = self.process_batch(sentences)

        summary = RunSummary(sentences=len(results))
        output_file = self.config.output.output_file
        with _open_output(output_file) as stream:
            for result in results:
                write_result(stream, result, tag_probs=self.config.output.output_tag_probs)
                summary.tokens += len(result.tokens)
                if result.truncated:
                    summary.truncated += 1
                if result.failed:
                    summary.failed += 1
                    summary.failed_indices.append(result.index)

        if output_file is not None:
            logger.info(f"Output written to: {output_file}")
        if summary.failed:
            logger.warning(f"{summary.failed} sentence(s) failed")
        return summary
