# src/oddword/core/scanner.py
import sys
import os
import stat
from typing import Iterable, Iterator, Optional

from oddword.models import FileRecord
from oddword.core.ignore import (
    load_ignore_spec,
    load_include_spec,
    is_entry_ignored,
    is_entry_included,
)
from oddword.utils.tokenizer import Tokenizer


def _report(path: str, error: OSError) -> None:
    reason = error.strerror or str(error)
    print(f"{path}: {reason}", file=sys.stderr)


class CorpusScanner:
    def __init__(self, paths: Iterable[str], tokenizer: Optional[Tokenizer] = None):
        self.paths = list(paths)
        self.tokenizer = tokenizer or Tokenizer()
        self.ignore_spec = load_ignore_spec()
        self.include_spec = load_include_spec()

    def scan(self) -> Iterator[FileRecord]:
        """
        Visits every command-line path in order and yields one FileRecord
        per file that could be read. Bad paths are reported and skipped.
        """
        for path in self.paths:
            try:
                mode = os.stat(path).st_mode
            except OSError as e:
                _report(path, e)
                continue

            if stat.S_ISDIR(mode):
                yield from self._walk(path)
            elif stat.S_ISREG(mode):
                # Direct arguments bypass the extension filter.
                record = self._read(path)
                if record is not None:
                    yield record

    def _walk(self, top: str) -> Iterator[FileRecord]:
        def on_error(e: OSError) -> None:
            _report(e.filename or top, e)

        # followlinks mirrors a stat()-based traversal: symlinked directories are entered.
        for root, dirs, files in os.walk(top, onerror=on_error, followlinks=True):
            # --- 1. Prune hidden directories (in-place) ---
            dirs[:] = sorted(d for d in dirs if not is_entry_ignored(d, self.ignore_spec))

            # --- 2. Process files ---
            for name in sorted(files):
                if is_entry_ignored(name, self.ignore_spec):
                    continue

                file_path = os.path.join(root, name)
                try:
                    mode = os.stat(file_path).st_mode
                except OSError as e:
                    _report(file_path, e)
                    continue

                if not stat.S_ISREG(mode):
                    continue
                if not is_entry_included(name, self.include_spec):
                    continue

                record = self._read(file_path)
                if record is not None:
                    yield record

    def _read(self, path: str) -> Optional[FileRecord]:
        try:
            return self.tokenizer.count(path)
        except OSError as e:
            _report(path, e)
            return None
