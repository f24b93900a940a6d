"""Text tokenisation and stop-word filtering."""

import re

DELIMITERS = " \t\n\r\f\v.,;:!?\"'()[]{}-"

STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
        "in", "on", "at", "to", "for", "with", "by", "about", "of", "from",
    }
)

_SPLITTER = re.compile("[" + re.escape(DELIMITERS) + "]+")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def tokenize(text):
    """Split text on whitespace and punctuation into lower-cased tokens.

    Only ASCII letters are lower-cased; other characters are kept as they are.
    """
    return [
        token.translate(_ASCII_LOWER)
        for token in _SPLITTER.split(text)
        if token
    ]


def remove_stop_words(tokens):
    """Return the tokens that are not stop words, keeping their order."""
    return [token for token in tokens if token not in STOP_WORDS]