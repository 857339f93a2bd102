"""Command-line interface for the tagging pipeline."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config import Config
from .errors import FatalModelError
from .pipeline import TaggingPipeline


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Annotate each word with a part-of-speech tag",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input holds one sentence per line, words separated by white space.

Examples:
  # Tag a file with a lexicon model
  postagger --model models/lexicon.tsv input.txt

  # Read from stdin, write to a file
  cat input.txt | postagger --model models/lexicon.tsv --output tagged.txt -

  # Using a config file and listing candidate tags
  postagger --config config.yaml --output-tag-probs
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Input file (default: stdin, or '-' for stdin)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--model",
        "-m",
        type=Path,
        help="Path to the primary lexicon model (TSV: word, tag, count)",
    )
    parser.add_argument(
        "--secondary-model",
        type=Path,
        help="Path to a secondary lexicon model (implies --secondary)",
    )
    parser.add_argument(
        "--secondary",
        action="store_true",
        help="Enable the secondary scoring source",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--max-sentence-length",
        type=int,
        help="Truncate sentences longer than this (default: 990)",
    )
    parser.add_argument(
        "--prune-threshold",
        type=float,
        help="Relative probability below which tags are pruned (default: 0.001)",
    )
    parser.add_argument(
        "--bracket-style",
        choices=["pos", "ptb"],
        help="Bracket normalization applied before scoring (default: pos)",
    )
    parser.add_argument(
        "--output-tag-probs",
        action="store_true",
        help="List candidate tags and their probabilities for every word",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress progress bars",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from a config file and command-line overrides."""
    config = Config.from_yaml(args.config) if args.config else Config()

    overrides: dict = {"tagging": {}, "model": {}, "output": {}}
    if args.input:
        overrides["input_file"] = args.input
    if args.model:
        overrides["model"]["path"] = args.model
    if args.secondary_model:
        overrides["model"]["secondary_path"] = args.secondary_model
        overrides["tagging"]["enable_secondary_source"] = True
    if args.secondary:
        overrides["tagging"]["enable_secondary_source"] = True
    if args.max_sentence_length is not None:
        overrides["tagging"]["max_sentence_length"] = args.max_sentence_length
    if args.prune_threshold is not None:
        overrides["tagging"]["probability_prune_threshold"] = args.prune_threshold
    if args.bracket_style:
        overrides["tagging"]["bracket_style"] = args.bracket_style
    if args.output:
        overrides["output"]["output_file"] = args.output
    if args.output_tag_probs:
        overrides["output"]["output_tag_probs"] = True
    if args.quiet:
        overrides["output"]["show_progress"] = False

    return config.with_overrides(overrides)


def main(args: Optional[list] = None) -> int:
    """Main entry point.

    Returns:
        0 on success, 1 when the run could not start or aborted,
        2 when some sentences failed
    """
    parsed = build_parser().parse_args(args)
    setup_logging(parsed.verbose)

    try:
        config = build_config(parsed)
    except (ValidationError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        pipeline = TaggingPipeline.from_config(config)
    except FatalModelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        summary = pipeline.run()
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Tagging failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger(__name__).info(
        f"Tagged {summary.sentences} sentences ({summary.tokens} tokens, "
        f"{summary.truncated} truncated, {summary.failed} failed)"
    )
    return 2 if summary.failed else 0


if __name__ == "__main__":
    sys.exit(main())
