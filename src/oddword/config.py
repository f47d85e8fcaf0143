# src/oddword/config.py

# Bytes read per chunk; tokens may span any number of chunks.
BUFFER_SIZE = 4096

LEADING_JUNK = b"([{\"'"
TRAILING_JUNK = b")]}\"',.!?"

DEFAULT_IGNORE_PATTERNS = [
    "# Hidden files and directories",
    ".*",
]

DEFAULT_INCLUDE_PATTERNS = [
    "*.txt",
]
