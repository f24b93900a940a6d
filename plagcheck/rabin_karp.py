"""Matching of n-grams between collections using a Rabin-Karp style hash."""

PRIME = 101


def rolling_hash(text):
    """Hash the UTF-8 bytes of text as a base-256 number modulo PRIME."""
    value = 0
    for byte in text.encode("utf-8"):
        value = (value * 256 + byte) % PRIME
    return value


def find_matches(collection1, collection2):
    """Return the indices of n-grams in collection1 that also occur in collection2."""
    buckets = {}
    for text, _ in collection2:
        buckets.setdefault(rolling_hash(text), set()).add(text)
    return [
        index
        for index, (text, _) in enumerate(collection1)
        if text in buckets.get(rolling_hash(text), ())
    ]