#!/usr/bin/env python3
"""
Example: Pairwise Protein Alignment with pairalign

This example demonstrates the alignment capabilities of pairalign:
- Parsing protein sequences
- Global and local alignment
- Enumerating tied optimal alignments
- Comparing gap models and substitution matrices
- Configuring a reusable aligner
"""

import sys
sys.path.insert(0, '..')

from pairalign import (
    AlignerConfig,
    PairwiseAligner,
    Protein,
    SequenceError,
    align_proteins,
    format_alignment,
    longest,
)
from pairalign.align import format_alignments
from pairalign.scoring import available_matrices


def demo_sequences():
    """Demonstrate protein parsing."""
    print("\n" + "=" * 60)
    print("PROTEIN SEQUENCES")
    print("=" * 60)

    protein = Protein.from_string("mvLSpadKT")
    print(f"\nParsed: {protein} ({len(protein)} residues)")
    print(f"Residue codes: {protein.codes.tolist()}")

    for text in ["", "MVLSBADKT", "MVLSＰADKT"]:
        try:
            Protein.from_string(text)
        except SequenceError as e:
            print(f"\n{text!r} rejected ({e.kind}):")
            print(e)


def demo_global():
    """Demonstrate global alignment."""
    print("\n" + "=" * 60)
    print("GLOBAL ALIGNMENT")
    print("=" * 60)

    seq1 = "MVLSPADKTNVKAAWGKVGAHAGEYGAEALERMFLSFPTTKTYFPHF"
    seq2 = "MVLSGEDKSNIKAAWGKIGGHGAEYGAEALERMFASFPTTKTYFPHF"
    alignments = align_proteins(seq1, seq2)
    best = alignments[0]

    print(f"\nScore: {best.score:g}")
    print(f"Optimal alignments: {len(alignments)}")
    print(f"Identity: {best.identity:.2%}")
    print()
    print(format_alignment(best))


def demo_local():
    """Demonstrate local alignment."""
    print("\n" + "=" * 60)
    print("LOCAL ALIGNMENT")
    print("=" * 60)

    seq1 = "HEAGAWGHEE"
    seq2 = "PAWHEAE"
    alignments = align_proteins(seq1, seq2, mode="local")

    for alignment in alignments:
        print(f"\nScore {alignment.score:g}: "
              f"{seq1}[{alignment.start1}:{alignment.end1}] vs "
              f"{seq2}[{alignment.start2}:{alignment.end2}]")
        print(format_alignment(alignment))

    best = longest(alignments)
    print(f"\nLongest local alignment: {best.aligned1} / {best.aligned2}")


def demo_ties():
    """Demonstrate enumeration of tied alignments."""
    print("\n" + "=" * 60)
    print("TIED OPTIMAL ALIGNMENTS")
    print("=" * 60)

    alignments = align_proteins("GGGGG", "GG")
    print(f"\nGGGGG vs GG: {len(alignments)} alignments\n")
    print(format_alignments(alignments))


def demo_scoring():
    """Compare gap models and substitution matrices."""
    print("\n" + "=" * 60)
    print("SCORING MODELS")
    print("=" * 60)

    seq1 = "WAAAAW"
    seq2 = "WW"
    affine = align_proteins(seq1, seq2, open_cost=10, extend_cost=1)[0]
    linear = align_proteins(seq1, seq2, extend_cost=4, gap_model="linear")[0]
    print(f"\n{seq1} vs {seq2}")
    print(f"   Affine (10 + 1 * n): {affine.score:g}  gap runs {affine.gap_runs}")
    print(f"   Linear (4 * n):      {linear.score:g}  gap runs {linear.gap_runs}")

    print(f"\nBuilt-in matrices: {', '.join(available_matrices())}")
    for name in available_matrices():
        score = align_proteins("KEVLA", "KDVLA", matrix=name)[0].score
        print(f"   KEVLA vs KDVLA with {name}: {score:g}")


def demo_aligner():
    """Demonstrate a reusable, configured aligner."""
    print("\n" + "=" * 60)
    print("CONFIGURED ALIGNER")
    print("=" * 60)

    config = AlignerConfig(matrix="BLOSUM45", open_cost=11, mode="local",
                           strategy="antidiagonal", max_alignments=5)
    aligner = PairwiseAligner(config)
    print(f"\n{aligner}")

    pairs = [
        ("MNGTEGPNFYVPFSNKTGVVRSPFEAPQYYLAEPWQFSMLAAYMFLLIMLGFPINFLTLYV",
         "MNGTEGLNFYVPFSNKTGVVRSPFEYPQYYLAEPWQFSMLAAYMFLLIVLGFPINFLTLYV"),
        ("ACDEFGHIKLMNPQRSTVWY", "YWVTSRQPNMLKIHGFEDCA"),
    ]
    for seq1, seq2 in pairs:
        print(f"\n{seq1[:20]}... vs {seq2[:20]}...")
        print(f"   Score only: {aligner.score(seq1, seq2):g}")
        alignments = aligner.align(seq1, seq2)
        print(f"   Alignments returned: {len(alignments)}")
        print(f"   Length of first: {len(alignments[0])}")


def main():
    print("=" * 60)
    print("pairalign Protein Alignment Demo")
    print("=" * 60)

    demo_sequences()
    demo_global()
    demo_local()
    demo_ties()
    demo_scoring()
    demo_aligner()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
