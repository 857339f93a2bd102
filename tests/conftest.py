"""Shared fixtures for the tagger tests."""

from pathlib import Path

import pandas as pd
import pytest

from postagger.config import Config, OutputConfig, TaggingConfig
from postagger.oracles import ScoringOracle


class FakeOracle(ScoringOracle):
    """Oracle returning fixed distributions per word and recording its calls."""

    def __init__(self, table=None, default=None, name="fake", available=True):
        self.table = table or {}
        self.default = default if default is not None else {"NN": 1.0}
        self.name = name
        self._available = available
        self.calls = []

    @property
    def available(self) -> bool:
        return self._available

    def score(self, words):
        self.calls.append(list(words))
        return [dict(self.table.get(word, self.default)) for word in words]


class MisalignedOracle(FakeOracle):
    """Oracle that drops the last distribution when it sees the word 'bad'."""

    def score(self, words):
        output = super().score(words)
        if "bad" in words:
            return output[:-1]
        return output


def make_config(**tagging) -> Config:
    return Config(
        tagging=TaggingConfig(**tagging),
        output=OutputConfig(show_progress=False),
    )


@pytest.fixture
def lexicon_path(tmp_path: Path) -> Path:
    """Write a small lexicon model and return its path."""
    rows = [
        {"word": "the", "tag": "DT", "count": 10},
        {"word": "dog", "tag": "NN", "count": 5},
        {"word": "dog", "tag": "VB", "count": 1},
        {"word": "runs", "tag": "VBZ", "count": 4},
        {"word": "(", "tag": "-LRB-", "count": 2},
        {"word": ")", "tag": "-RRB-", "count": 2},
    ]
    path = tmp_path / "lexicon.tsv"
    pd.DataFrame(rows).to_csv(path, sep="\t", index=False)
    return path


class CrashingOracle(FakeOracle):
    """Oracle that raises when it sees the word 'boom'."""

    def score(self, words):
        if "boom" in words:
            raise RuntimeError("oracle crashed")
        return super().score(words)
