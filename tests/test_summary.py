import pytest

from seqfreq.io import parse_fasta_text
from seqfreq.summary import collection_summary, render_report, sequence_table


def test_sequence_table_nucleotide_columns() -> None:
    collection = parse_fasta_text(">s1\nAATTGGCC\n>s2\nAAAAGGGG\n")
    df = sequence_table(collection)
    assert list(df.columns) == [
        "name",
        "length",
        "alphabet",
        "gc_content",
        "freq_A",
        "freq_T",
        "freq_G",
        "freq_C",
    ]
    assert df["name"].tolist() == ["s1", "s2"]
    assert df.loc[0, "gc_content"] == pytest.approx(0.5)
    assert df.loc[1, "freq_A"] == pytest.approx(0.5)


def test_sequence_table_amino_acid_has_twenty_frequency_columns() -> None:
    df = sequence_table(parse_fasta_text(">p1\nMKTAYIAKQR\n"))
    assert sum(c.startswith("freq_") for c in df.columns) == 20
    assert df.loc[0, "alphabet"] == "aa"


def test_sequence_table_empty_collection() -> None:
    df = sequence_table(parse_fasta_text(""))
    assert df.empty
    assert list(df.columns) == ["name", "length", "alphabet", "gc_content"]


def test_collection_summary_payload() -> None:
    payload = collection_summary(parse_fasta_text(">a\nAC\n>b\nAG\n"))
    assert payload["names"] == ["a", "b"]
    assert payload["is_aligned"] is True
    assert payload["alignment_length"] == 2


def test_render_report_formats_frequencies() -> None:
    text = render_report(parse_fasta_text(">s1\nAATTGGCC\n>s2\nNN\n"), precision=4)
    assert "alphabet: nuc" in text
    assert "aligned: false" in text
    assert "alignment_length: NA" in text
    assert "frequencies: [0.2500 0.2500 0.2500 0.2500]" in text
    assert "s1\tlength=8\tgc=0.5000" in text
    assert "warning: Sequence 's2' has no canonical residues" in text
