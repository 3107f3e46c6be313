import json
from pathlib import Path

import pandas as pd
import pytest

from seqfreq.cli import main


def _write_alignment(path: Path, records: dict[str, str]) -> Path:
    lines: list[str] = []
    for name, seq in records.items():
        lines.append(f">{name}")
        lines.append(seq)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_cli_stats_outputs(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SEQFREQ_FIXED_TIMESTAMP_UTC", "2024-01-01T00:00:00+00:00")
    fasta = _write_alignment(tmp_path / "seqs.fasta", {"a": "AATTGGCC", "b": "AATTGGCC"})
    out_json = tmp_path / "stats.json"
    out_tsv = tmp_path / "tables" / "per_seq.tsv"
    manifest = tmp_path / "manifest.json"

    assert (
        main(
            [
                "stats",
                "--input",
                str(fasta),
                "--output",
                str(out_json),
                "--table",
                str(out_tsv),
                "--manifest",
                str(manifest),
            ]
        )
        == 0
    )
    stdout = capsys.readouterr().out
    assert "aligned: true" in stdout
    assert "frequencies: [0.2500 0.2500 0.2500 0.2500]" in stdout

    payload = json.loads(out_json.read_text(encoding="utf-8"))
    assert payload["alphabet"] == "nuc"
    assert payload["frequencies"]["G"] == pytest.approx(0.25)

    df = pd.read_csv(out_tsv, sep="\t")
    assert df["name"].tolist() == ["a", "b"]
    assert df["gc_content"].tolist() == pytest.approx([0.5, 0.5])

    meta = json.loads(manifest.read_text(encoding="utf-8"))
    assert meta["command"] == "stats"
    assert meta["n_sequences"] == 2
    assert len(meta["input_sha256"]) == 64
    assert meta["system"]["timestamp_utc"] == "2024-01-01T00:00:00+00:00"


def test_cli_stats_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    fasta = _write_alignment(tmp_path / "p.fasta", {"p1": "MKTAYIAKQR"})
    assert main(["stats", "--input", str(fasta), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["alphabet"] == "aa"
    assert len(payload["frequencies"]) == 20


def test_cli_columns(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    fasta = _write_alignment(tmp_path / "aln.fasta", {"s1": "AC", "s2": "AG"})
    assert main(["columns", "--input", str(fasta)]) == 0
    assert capsys.readouterr().out.splitlines() == ["2", "0\tAA", "1\tCG"]


def test_cli_columns_unaligned_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    fasta = _write_alignment(tmp_path / "ragged.fasta", {"s1": "ACG", "s2": "AG"})
    with pytest.raises(SystemExit) as excinfo:
        main(["columns", "--input", str(fasta)])
    assert excinfo.value.code == 2
    assert "not aligned" in capsys.readouterr().err


def test_cli_fasta_canonicalizes(tmp_path: Path) -> None:
    src = tmp_path / "wrapped.fasta"
    src.write_text(">s1 desc\nAC\nGT\n>s2\nTT\nAA\n", encoding="utf-8")
    out = tmp_path / "canonical.fasta"
    assert main(["fasta", "--input", str(src), "--output", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == ">s1 desc\nACGT\n>s2\nTTAA\n"


def test_cli_missing_input_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["stats", "--input", str(tmp_path / "nope.fasta")])
    assert excinfo.value.code == 2
    assert "not found" in capsys.readouterr().err
