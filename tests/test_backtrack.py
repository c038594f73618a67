"""Tests for traceback enumeration on hand-built matrices."""

import logging

import pytest

from pairalign import AlignmentCancelled, InvariantError, Protein
from pairalign.align import Direction, TracebackMatrix, iter_paths, path_to_pairs, traceback
from pairalign.sequence import AminoAcid as AA

D, V, H = Direction.DIAGONAL, Direction.VERTICAL, Direction.HORIZONTAL


def tie_matrix(second_row_middle=D):
    """3x3 matrix whose corner holds a diagonal/horizontal tie."""
    return TracebackMatrix.from_cells([
        [(D, 0), (H, -1), (H, -2)],
        [(V, -1), (D, 1), (D | V, 0)],
        [(V, -2), (second_row_middle, 0), (D | H, 2)],
    ])


def gap_run_matrix():
    """3x2 matrix where (1, 1) can either extend a vertical gap or stop it."""
    return TracebackMatrix.from_cells([
        [(D, 0), (H, -11)],
        [(V, -11), (D | V, -1)],
        [(V, -12), (V, -2)],
    ])


class TestIterPaths:

    def test_two_paths(self):
        paths = list(iter_paths(tie_matrix(), [(2, 2)]))
        assert paths == [
            [(2, 2), (1, 1), (0, 0)],
            [(2, 2), (2, 1), (1, 0), (0, 0)],
        ]

    def test_three_paths(self):
        paths = list(iter_paths(tie_matrix(D | V), [(2, 2)]))
        assert paths == [
            [(2, 2), (1, 1), (0, 0)],
            [(2, 2), (2, 1), (1, 0), (0, 0)],
            [(2, 2), (2, 1), (1, 1), (0, 0)],
        ]

    def test_paths_are_independent(self):
        paths = list(iter_paths(tie_matrix(D | V), [(2, 2)]))
        paths[0].append((9, 9))
        assert paths[1] == [(2, 2), (2, 1), (1, 0), (0, 0)]

    def test_unreachable_tie_is_ignored(self):
        # (1, 2) holds a tie but no path goes through it
        paths = list(iter_paths(tie_matrix(), [(2, 2)]))
        assert all((1, 2) not in path for path in paths)

    def test_cutoff_stops_paths(self):
        paths = list(iter_paths(tie_matrix(), [(2, 2)], cutoff=0.0))
        assert paths == [
            [(2, 2), (1, 1), (0, 0)],
            [(2, 2), (2, 1)],
        ]

    def test_start_at_origin(self):
        assert list(iter_paths(tie_matrix(), [(0, 0)])) == [[(0, 0)]]

    def test_several_starts_in_order(self):
        paths = list(iter_paths(tie_matrix(), [(1, 1), (2, 2)]))
        assert paths[0] == [(1, 1), (0, 0)]
        assert len(paths) == 3

    def test_follow_gap_runs(self):
        paths = list(iter_paths(gap_run_matrix(), [(2, 1)]))
        assert paths == [[(2, 1), (1, 1), (0, 1), (0, 0)]]

    def test_all_directions(self):
        paths = list(iter_paths(gap_run_matrix(), [(2, 1)], follow_gap_runs=False))
        assert paths == [
            [(2, 1), (1, 1), (0, 0)],
            [(2, 1), (1, 1), (0, 1), (0, 0)],
        ]

    def test_empty_cell_is_an_invariant_error(self):
        matrix = TracebackMatrix.from_cells([
            [None, (H, 0)],
            [(V, 0), (D, 1)],
        ])
        with pytest.raises(InvariantError):
            list(iter_paths(matrix, [(1, 1)]))

    def test_leaving_the_matrix_is_an_invariant_error(self):
        matrix = TracebackMatrix.from_cells([[(D, 0), (V, 0)]])
        with pytest.raises(InvariantError):
            list(iter_paths(matrix, [(0, 1)]))

    def test_cancel(self):
        with pytest.raises(AlignmentCancelled) as exc:
            list(iter_paths(tie_matrix(), [(2, 2)], cancel=lambda: True))
        assert exc.value.stage == "backtracking"


class TestTraceback:

    def test_collects_all(self):
        assert len(traceback(tie_matrix(D | V), [(2, 2)])) == 3

    def test_limit(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pairalign"):
            paths = traceback(tie_matrix(D | V), [(2, 2)], limit=2)
        assert len(paths) == 2
        assert "more optimal paths exist" in caplog.text

    def test_limit_not_reached(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pairalign"):
            paths = traceback(tie_matrix(), [(2, 2)], limit=5)
        assert len(paths) == 2
        assert caplog.text == ""


class TestPathToPairs:

    def test_pairs_in_forward_order(self):
        left = Protein.from_string("AW")
        top = Protein.from_string("AW")
        pairs = path_to_pairs([(2, 2), (2, 1), (1, 0), (0, 0)], left, top)
        assert pairs == [(AA.A, None), (AA.W, AA.A), (None, AA.W)]

    def test_single_cell_path(self):
        assert path_to_pairs([(0, 0)], Protein(), Protein()) == []

    def test_invalid_step(self):
        left = Protein.from_string("AW")
        with pytest.raises(InvariantError):
            path_to_pairs([(2, 2), (0, 0)], left, left)
