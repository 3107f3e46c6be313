from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__


def _emit_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqfreq",
        description="seqfreq: FASTA alphabet inference and base/residue frequency statistics.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # stats
    stats = subparsers.add_parser("stats", help="Summarize alphabet, alignment and frequencies.")
    stats.add_argument("--input", required=True, metavar="FASTA")
    stats.add_argument("--precision", type=int, default=4)
    stats.add_argument("--output", default=None, metavar="JSON")
    stats.add_argument("--table", default=None, metavar="TSV")
    stats.add_argument("--json", action="store_true")
    stats.add_argument("--manifest", default=None, metavar="JSON")

    # columns
    columns = subparsers.add_parser("columns", help="Print alignment columns of an aligned FASTA.")
    columns.add_argument("--input", required=True, metavar="FASTA")
    columns.add_argument("--json", action="store_true")

    # fasta
    fasta = subparsers.add_parser("fasta", help="Re-emit FASTA in canonical unwrapped form.")
    fasta.add_argument("--input", required=True, metavar="FASTA")
    fasta.add_argument("--output", default=None, metavar="FASTA")

    return parser


def _cmd_stats(args: argparse.Namespace) -> int:
    from .io import read_fasta
    from .provenance import build_manifest, write_json_file
    from .summary import collection_summary, render_report, sequence_table

    if args.precision < 0:
        raise ValueError("--precision must be >= 0.")
    collection = read_fasta(args.input)
    payload = collection_summary(collection)
    if args.output:
        write_json_file(args.output, payload)
    if args.table:
        df = sequence_table(collection)
        out_path = Path(args.table)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out_path, sep="\t", index=False)
    if args.json:
        _emit_json(payload)
    else:
        print(render_report(collection, precision=args.precision))

    if args.manifest:
        manifest = build_manifest("stats", args.input, argv=getattr(args, "_argv", []))
        manifest.update(
            {
                "n_sequences": len(collection),
                "alphabet": None if collection.alphabet is None else collection.alphabet.value,
                "is_aligned": collection.is_aligned,
                "output_json": None if args.output is None else str(Path(args.output).resolve()),
                "output_tsv": None if args.table is None else str(Path(args.table).resolve()),
            }
        )
        write_json_file(args.manifest, manifest)
    return 0


def _cmd_columns(args: argparse.Namespace) -> int:
    from .io import read_fasta

    collection = read_fasta(args.input)
    columns = collection.columns()
    if args.json:
        _emit_json({str(pos): col for pos, col in columns.items()})
        return 0
    print(len(columns))
    for pos in sorted(columns):
        print(f"{pos}\t{columns[pos]}")
    return 0


def _cmd_fasta(args: argparse.Namespace) -> int:
    from .io import read_fasta, write_fasta

    collection = read_fasta(args.input)
    if args.output:
        write_fasta(collection, args.output)
    else:
        sys.stdout.write(collection.to_fasta())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    args._argv = list(argv if argv is not None else sys.argv[1:])
    _configure_logging(args.log_level)
    try:
        if args.command == "stats":
            return _cmd_stats(args)
        if args.command == "columns":
            return _cmd_columns(args)
        if args.command == "fasta":
            return _cmd_fasta(args)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")
    parser.exit(status=2, message="error: unknown command\n")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
