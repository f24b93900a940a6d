"""Reading documents from disk."""


def read_file(filename):
    """Return the whole text of a file.

    Raises OSError if the file cannot be opened or read.
    """
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()