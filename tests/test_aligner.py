"""Tests for the alignment entry points and the Alignment record."""

import logging

import pytest

from pairalign import (
    AlignerConfig,
    Alignment,
    AlignmentCancelled,
    AlignmentMode,
    ConfigurationError,
    PairwiseAligner,
    SequenceError,
    align,
    align_proteins,
    longest,
)
from pairalign.sequence import AminoAcid as AA


def pair_set(alignments):
    return {a.pairs for a in alignments}


class TestGlobalAlignment:

    def test_gapless(self, affine_schema, protein):
        result = align(protein("MVLSPADKT"), protein("MVLSGEDKS"), affine_schema)
        assert len(result) == 1
        alignment = result[0]
        assert alignment.score == 26.0
        assert alignment.aligned1 == "MVLSPADKT"
        assert alignment.aligned2 == "MVLSGEDKS"
        assert alignment.mismatches == 3
        assert (alignment.start1, alignment.end1) == (0, 9)
        assert (alignment.start2, alignment.end2) == (0, 9)

    def test_extended_gap(self, affine_schema, protein):
        result = align(protein("WAAW"), protein("WW"), affine_schema)
        assert len(result) == 1
        assert result[0].pairs == ((AA.W, AA.W), (AA.A, None), (AA.A, None), (AA.W, AA.W))
        assert result[0].score == 10.0

    def test_ties(self, affine_schema, protein):
        result = align(protein("AA"), protein("A"), affine_schema)
        assert [a.pairs for a in result] == [
            ((AA.A, None), (AA.A, AA.A)),
            ((AA.A, AA.A), (AA.A, None)),
        ]
        assert all(a.score == -7.0 for a in result)

    def test_empty_left(self, affine_schema, protein):
        result = align(protein(""), protein("ACD"), affine_schema)
        assert len(result) == 1
        assert result[0].pairs == ((None, AA.A), (None, AA.C), (None, AA.D))
        assert result[0].score == -13.0

    @pytest.mark.parametrize("mode", ["global", "local"])
    def test_both_empty(self, mode, affine_schema, protein):
        result = align(protein(""), protein(""), affine_schema, mode)
        assert len(result) == 1
        assert len(result[0]) == 0
        assert result[0].score == 0.0

    def test_length_bounds(self, affine_schema, sequence_pair):
        left, top = sequence_pair
        for alignment in align(left, top, affine_schema):
            assert max(len(left), len(top)) <= len(alignment) <= len(left) + len(top)
            assert alignment.aligned1.replace("-", "") == str(left)
            assert alignment.aligned2.replace("-", "") == str(top)


class TestLocalAlignment:

    def test_no_positive_score(self, affine_schema, protein):
        result = align(protein("PPPP"), protein("WWWW"), affine_schema, "local")
        assert len(result) == 1
        assert result[0].pairs == ()
        assert result[0].score == 0.0

    def test_single_match(self, affine_schema, protein):
        result = align(protein("PWP"), protein("CWC"), affine_schema, "local")
        assert len(result) == 1
        assert result[0].pairs == ((AA.W, AA.W),)
        assert (result[0].start1, result[0].end1) == (1, 2)
        assert (result[0].start2, result[0].end2) == (1, 2)

    def test_every_maximum_is_reported(self, affine_schema, protein):
        result = align(protein("WCW"), protein("WW"), affine_schema, "local")
        assert [(a.end1, a.end2) for a in result] == [(1, 1), (1, 2), (3, 1), (3, 2)]
        assert all(a.score == 11.0 for a in result)

    def test_ranges_are_substrings(self, affine_schema, sequence_pair):
        left, top = sequence_pair
        for alignment in align(left, top, affine_schema, "local"):
            assert alignment.score >= 0
            segment1 = str(left)[alignment.start1:alignment.end1]
            segment2 = str(top)[alignment.start2:alignment.end2]
            assert alignment.aligned1.replace("-", "") == segment1
            assert alignment.aligned2.replace("-", "") == segment2

    def test_longest(self, affine_schema, protein):
        result = align(protein("HEAGAWGHEE"), protein("PAWHEAE"), affine_schema, "local")
        best = longest(result)
        assert best in result
        assert all(len(best) >= len(a) for a in result)


class TestAlignmentProperties:

    @pytest.mark.parametrize("mode", ["global", "local"])
    def test_rescore_matches_score(self, mode, affine_schema, sequence_pair):
        left, top = sequence_pair
        for alignment in align(left, top, affine_schema, mode):
            assert alignment.rescore(affine_schema) == pytest.approx(alignment.score)

    def test_rescore_with_linear_gaps(self, linear_schema, sequence_pair):
        left, top = sequence_pair
        for alignment in align(left, top, linear_schema):
            assert alignment.rescore(linear_schema) == pytest.approx(alignment.score)

    @pytest.mark.parametrize("mode", ["global", "local"])
    def test_symmetry(self, mode, affine_schema, sequence_pair):
        left, top = sequence_pair
        forward = align(left, top, affine_schema, mode)
        backward = align(top, left, affine_schema, mode)
        assert forward[0].score == backward[0].score
        assert pair_set(a.mirrored() for a in forward) == pair_set(backward)

    def test_single_score(self, affine_schema, sequence_pair):
        left, top = sequence_pair
        scores = {a.score for a in align(left, top, affine_schema)}
        assert len(scores) == 1

    def test_deterministic(self, affine_schema, sequence_pair):
        left, top = sequence_pair
        assert align(left, top, affine_schema, "local") == align(left, top, affine_schema,
                                                                 "local")

    @pytest.mark.parametrize("mode", ["global", "local"])
    def test_strategies_agree(self, mode, affine_schema, sequence_pair):
        left, top = sequence_pair
        rows = align(left, top, affine_schema, mode, strategy="rows")
        diagonals = align(left, top, affine_schema, mode, strategy="antidiagonal")
        assert rows == diagonals

    def test_all_directions_is_a_superset(self, affine_schema, sequence_pair):
        left, top = sequence_pair
        runs = pair_set(align(left, top, affine_schema))
        every = pair_set(align(left, top, affine_schema, follow_gap_runs=False))
        assert runs <= every


class TestAlignOptions:

    def test_max_alignments(self, affine_schema, protein, caplog):
        with caplog.at_level(logging.WARNING, logger="pairalign"):
            result = align(protein("AA"), protein("A"), affine_schema, max_alignments=1)
        assert len(result) == 1
        assert "more optimal alignments exist" in caplog.text

    @pytest.mark.parametrize("value", [0, -3])
    def test_bad_max_alignments(self, value, affine_schema, protein):
        with pytest.raises(ConfigurationError):
            align(protein("A"), protein("A"), affine_schema, max_alignments=value)

    def test_mode_enum(self, affine_schema, protein):
        result = align(protein("W"), protein("W"), affine_schema, AlignmentMode.LOCAL)
        assert result[0].mode == "local"

    def test_unknown_mode(self, affine_schema, protein):
        with pytest.raises(ConfigurationError):
            align(protein("W"), protein("W"), affine_schema, "glocal")

    def test_cancel_during_fill(self, affine_schema, protein):
        with pytest.raises(AlignmentCancelled) as exc:
            align(protein("AA"), protein("A"), affine_schema, cancel=lambda: True)
        assert exc.value.stage == "matrix fill"

    def test_cancel_during_backtracking(self, affine_schema, protein):
        calls = []

        def cancel():
            calls.append(1)
            # Two polls happen during the fill of a 3-row matrix
            return len(calls) > 2

        with pytest.raises(AlignmentCancelled) as exc:
            align(protein("AA"), protein("A"), affine_schema, cancel=cancel)
        assert exc.value.stage == "backtracking"


class TestAlignmentRecord:

    def _gapped(self, affine_schema, protein):
        return align(protein("WAAW"), protein("WW"), affine_schema)[0]

    def test_counts(self, affine_schema, protein):
        alignment = self._gapped(affine_schema, protein)
        assert len(alignment) == 4
        assert alignment.matches == 2
        assert alignment.mismatches == 0
        assert alignment.gaps == 2
        assert alignment.gap_runs == [2]
        assert alignment.identity == 0.5

    def test_aligned_strings(self, affine_schema, protein):
        alignment = self._gapped(affine_schema, protein)
        assert alignment.aligned1 == "WAAW"
        assert alignment.aligned2 == "W--W"

    def test_mirrored(self, affine_schema, protein):
        alignment = self._gapped(affine_schema, protein)
        mirrored = alignment.mirrored()
        assert mirrored.aligned1 == "W--W"
        assert mirrored.aligned2 == "WAAW"
        assert (mirrored.end1, mirrored.end2) == (2, 4)
        assert mirrored.mirrored() == alignment

    def test_gap_runs_per_side(self):
        alignment = Alignment(
            pairs=((AA.A, None), (None, AA.C), (None, AA.D), (AA.E, AA.E), (AA.F, None)),
            score=0.0, mode="global", start1=0, end1=3, start2=0, end2=3,
        )
        assert alignment.gap_runs == [1, 2, 1]

    def test_str(self, affine_schema, protein):
        assert str(self._gapped(affine_schema, protein)) == "WAAW\n|  |\nW__W"

    def test_immutable(self, affine_schema, protein):
        alignment = self._gapped(affine_schema, protein)
        with pytest.raises(AttributeError):
            alignment.score = 0

    def test_longest_keeps_first_tie(self, affine_schema, protein):
        result = align(protein("AA"), protein("A"), affine_schema)
        assert longest(result) is result[0]

    def test_longest_of_nothing(self):
        with pytest.raises(ValueError):
            longest([])


class TestPairwiseAligner:

    def test_defaults(self):
        aligner = PairwiseAligner()
        assert aligner.config == AlignerConfig()
        assert aligner.schema.gap_open() == 10.0
        assert aligner.schema.gap_extend() == 1.0
        assert aligner.schema.substitution.name == "BLOSUM62"

    def test_strings(self):
        result = PairwiseAligner().align("MVLSPADKT", "mvlsgedks")
        assert result[0].score == 26.0

    def test_overrides(self):
        config = AlignerConfig(mode="local")
        aligner = PairwiseAligner(config, open_cost=5)
        assert aligner.config.mode == "local"
        assert aligner.config.open_cost == 5.0
        assert config.open_cost == 10.0

    def test_score_without_traceback(self):
        aligner = PairwiseAligner(mode="local")
        result = aligner.align("HEAGAWGHEE", "PAWHEAE")
        assert aligner.score("HEAGAWGHEE", "PAWHEAE") == result[0].score

    def test_max_alignments(self):
        assert len(PairwiseAligner(max_alignments=1).align("AA", "A")) == 1

    def test_invalid_override(self):
        with pytest.raises(ConfigurationError):
            PairwiseAligner(extend_cost=-1)
        with pytest.raises(ConfigurationError):
            PairwiseAligner(colour="blue")

    def test_invalid_sequence(self):
        with pytest.raises(SequenceError):
            PairwiseAligner().align("MVLSBADKT", "MVLS")


class TestAlignProteins:

    def test_defaults(self):
        result = align_proteins("MVLSPADKT", "MVLSGEDKS")
        assert len(result) == 1
        assert result[0].score == 26.0

    def test_blosum45(self):
        result = align_proteins("W", "W", matrix="BLOSUM45")
        assert result[0].score == 15.0

    def test_pam160(self):
        result = align_proteins("AY", "AY", matrix="PAM160")
        assert result[0].score == 10.0

    def test_linear(self):
        result = align_proteins("WAAW", "WW", extend_cost=4, gap_model="linear")
        assert result[0].score == 14.0

    def test_empty_string_rejected(self):
        with pytest.raises(SequenceError) as exc:
            align_proteins("", "MVLS")
        assert exc.value.kind == SequenceError.EMPTY_STRING

    def test_bad_cost(self):
        with pytest.raises(ConfigurationError):
            align_proteins("MVLS", "MVLS", open_cost=float("nan"))
