# src/oddword/cli.py
import os
import sys
import argparse

# Module imports
from oddword.core.frequency import build_corpus, find_outliers
from oddword.core.scanner import CorpusScanner
from oddword.models import FileRecord, Outlier


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="oddword",
        description="Report, for each text file, the word most over-represented relative to the whole corpus.",
        epilog="Paths starting with '-' must follow a '--' separator, e.g. 'oddword -- -notes.txt'."
    )
    parser.add_argument("paths", nargs="+", metavar="path", help="File or directory (directories are searched for *.txt)")
    parser.add_argument("--show-ratio", action="store_true", help="Append the relative-frequency ratio to each line")
    return parser


def format_outlier(outlier: Outlier, show_ratio: bool = False) -> bytes:
    """
    Builds one output line as raw bytes: the path as the filesystem spelled it
    and the word exactly as it was read from the file.
    """
    line = os.fsencode(outlier.path) + b": " + outlier.word.encode("latin-1")
    if show_ratio:
        line += f" ({outlier.ratio:.4f})".encode("ascii")
    return line + b"\n"


def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        # 2. Scanning (one file at a time, in discovery order)
        scanner = CorpusScanner(args.paths)
        records: list[FileRecord] = list(scanner.scan())

        # 3. Aggregation & selection
        corpus = build_corpus(records)
        sys.stdout.flush()
        out = sys.stdout.buffer
        for outlier in find_outliers(records, corpus):
            out.write(format_outlier(outlier, args.show_ratio))
        out.flush()

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

    except MemoryError:
        print("Fatal: out of memory", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
