"""Tests for plain-text alignment rendering."""

import pytest

from pairalign import align, format_alignment
from pairalign.align import format_alignments


@pytest.fixture
def gapless(affine_schema, protein):
    return align(protein("MVLSPADKT"), protein("MVLSGEDKS"), affine_schema)[0]


class TestFormatAlignment:

    def test_match_and_mismatch_markers(self, gapless):
        assert format_alignment(gapless) == "MVLSPADKT\n||||::||:\nMVLSGEDKS"

    def test_gap_markers(self, affine_schema, protein):
        alignment = align(protein("WAAW"), protein("WW"), affine_schema)[0]
        assert format_alignment(alignment) == "WAAW\n|  |\nW__W"
        assert format_alignment(alignment.mirrored()) == "W__W\n|  |\nWAAW"

    def test_wrapping(self, gapless):
        text = format_alignment(gapless, width=4)
        assert text.split("\n") == [
            "MVLS", "||||", "MVLS",
            "PADK", "::||", "GEDK",
            "T", ":", "S",
        ]

    def test_exact_width_has_single_block(self, gapless):
        assert format_alignment(gapless, width=9).count("\n") == 2

    def test_empty(self, affine_schema, protein):
        alignment = align(protein("PPPP"), protein("WWWW"), affine_schema, "local")[0]
        assert format_alignment(alignment) == "\n\n"

    @pytest.mark.parametrize("width", [0, -5])
    def test_invalid_width(self, gapless, width):
        with pytest.raises(ValueError):
            format_alignment(gapless, width=width)

    def test_plain_pairs(self, gapless):
        assert format_alignment(list(gapless.pairs)) == format_alignment(gapless)


class TestFormatAlignments:

    def test_headers(self, affine_schema, protein):
        result = align(protein("AA"), protein("A"), affine_schema)
        text = format_alignments(result)
        assert text.split("\n") == [
            "# Alignment 1, score -7",
            "AA", " |", "_A",
            "# Alignment 2, score -7",
            "AA", "| ", "A_",
        ]
