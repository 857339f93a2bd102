"""Tests for distribution fusion."""

import pytest

from postagger.fusion import fuse, fuse_sources


class TestFuse:
    """Tests for additive merge of one token's distributions."""

    def test_additive_merge(self):
        fused = fuse([{"a": 2.0, "b": 1.0}, {"a": 1.0, "c": 3.0}])

        assert fused.scores == {"a": 3.0, "b": 1.0, "c": 3.0}
        assert fused.total == 7.0

    def test_no_sources(self):
        fused = fuse([])
        assert fused.scores == {}
        assert fused.total == 0.0

    def test_empty_secondary_source_is_harmless(self):
        fused = fuse([{"NN": 0.75, "VB": 0.25}, {}])
        assert fused.scores == {"NN": 0.75, "VB": 0.25}
        assert fused.total == 1.0

    def test_repeated_runs_are_identical(self):
        sources = [
            {"NN": 0.1, "VB": 0.2, "JJ": 0.3},
            {"VB": 0.7, "NN": 0.1},
            {"JJ": 0.05, "RB": 0.15},
        ]
        first = fuse(sources)
        for _ in range(5):
            again = fuse(sources)
            assert again.scores == first.scores
            assert again.total == first.total

    def test_key_order_within_source_does_not_matter(self):
        a = fuse([{"x": 0.1, "y": 0.2, "z": 0.3}])
        b = fuse([{"z": 0.3, "y": 0.2, "x": 0.1}])
        assert a.total == b.total


class TestFuseSources:
    """Tests for position-aligned fusion across a sentence."""

    def test_aligned_by_position(self):
        primary = [{"DT": 1.0}, {"NN": 0.6, "VB": 0.4}]
        secondary = [{}, {"VB": 0.5}]

        fused = fuse_sources([primary, secondary], 2)

        assert fused[0].scores == {"DT": 1.0}
        assert fused[1].scores == pytest.approx({"NN": 0.6, "VB": 0.9})
        assert fused[1].total == pytest.approx(1.5)
