from __future__ import annotations


class SeqFreqError(ValueError):
    """Base class for sequence parsing and statistics errors."""


class FastaParseError(SeqFreqError):
    def __init__(self, message: str, *, line_no: int | None = None, source: str | None = None):
        self.line_no = line_no
        self.source = source
        where = []
        if line_no is not None:
            where.append(f"line {line_no}")
        if source is not None:
            where.append(f"in {source}")
        super().__init__(f"{message} ({' '.join(where)})" if where else message)


class AlphabetMismatchError(SeqFreqError):
    def __init__(self, name: str, found: str, expected: str):
        self.name = name
        self.found = found
        self.expected = expected
        super().__init__(
            f"Sequences are not of the same alphabet: '{name}' is {found}, expected {expected}."
        )


class UnalignedCollectionError(SeqFreqError):
    pass


class UnsupportedAlphabetError(SeqFreqError):
    pass
