# src/oddword/utils/tokenizer.py
import re
from typing import BinaryIO, Dict, Iterator, Optional, Tuple

from oddword.config import BUFFER_SIZE, LEADING_JUNK, TRAILING_JUNK
from oddword.models import FileRecord

_HAS_LETTER = re.compile(rb"[A-Za-z]")


class Tokenizer:
    """
    Splits raw bytes into words and counts them.

    Whitespace is the ASCII set understood by bytes.split() and
    bytes.isspace(): space, tab, newline, carriage return, form feed and
    vertical tab. Every other byte belongs to a token.
    """

    def __init__(self, chunk_size: int = BUFFER_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def iter_raw_tokens(self, stream: BinaryIO) -> Iterator[bytes]:
        """Yields whitespace-delimited tokens, reading the stream chunk by chunk."""
        pending = bytearray()
        while True:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break

            if pending and chunk[:1].isspace():
                yield bytes(pending)
                pending.clear()

            pieces = chunk.split()
            if not pieces:
                continue

            ends_open = not chunk[-1:].isspace()

            # A token cut by the previous chunk boundary continues here.
            # pending grows in place so a long token is copied once, not per chunk.
            if pending:
                pending += pieces[0]
                if len(pieces) == 1 and ends_open:
                    continue
                yield bytes(pending)
                pending.clear()
                pieces = pieces[1:]

            if ends_open and pieces:
                pending += pieces.pop()

            yield from pieces

        if pending:
            yield bytes(pending)

    @staticmethod
    def normalize(token: bytes) -> Optional[str]:
        """
        Strips one leading run of ([{"' and one trailing run of )]}"',.!?,
        then lower-cases the rest. Returns None when no ASCII letter is left.
        """
        core = token.lstrip(LEADING_JUNK).rstrip(TRAILING_JUNK)
        if not _HAS_LETTER.search(core):
            return None
        # latin-1 keeps one code point per byte, so str ordering is byte ordering.
        return core.lower().decode("latin-1")

    def iter_words(self, stream: BinaryIO) -> Iterator[str]:
        for token in self.iter_raw_tokens(stream):
            word = self.normalize(token)
            if word is not None:
                yield word

    def count_stream(self, stream: BinaryIO) -> Tuple[Dict[str, int], int]:
        counts: Dict[str, int] = {}
        total = 0
        for word in self.iter_words(stream):
            counts[word] = counts.get(word, 0) + 1
            total += 1
        return counts, total

    def count(self, path: str) -> FileRecord:
        """Reads a file and returns its FileRecord. OSError propagates to the caller."""
        with open(path, "rb") as f:
            counts, total = self.count_stream(f)
        return FileRecord(path=path, counts=counts, total=total)
