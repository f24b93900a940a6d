"""Word n-grams and counted collections of them."""


class NGramCollection:
    """Distinct n-gram texts with their counts, in order of first appearance."""

    def __init__(self):
        self._counts = {}
        self._order = []

    def add(self, text):
        """Add one occurrence of an n-gram."""
        if text in self._counts:
            self._counts[text] += 1
        else:
            self._counts[text] = 1
            self._order.append(text)

    def __len__(self):
        return len(self._order)

    def __iter__(self):
        """Yield (text, count) pairs in order of first appearance."""
        for text in self._order:
            yield text, self._counts[text]

    def __getitem__(self, index):
        text = self._order[index]
        return text, self._counts[text]

    def __contains__(self, text):
        return text in self._counts

    def count_of(self, text):
        """Return how often an n-gram occurred, or 0 if it never did."""
        return self._counts.get(text, 0)

    def __repr__(self):
        return f"NGramCollection({list(self)!r})"


def create_ngrams(tokens, n):
    """Build the collection of space-joined n-grams of consecutive tokens.

    Raises ValueError if n is not positive or there are fewer than n tokens.
    """
    if n < 1:
        raise ValueError(f"n-gram size must be positive, got {n}")
    tokens = list(tokens)
    if len(tokens) < n:
        raise ValueError(f"need at least {n} tokens, got {len(tokens)}")
    collection = NGramCollection()
    for start in range(len(tokens) - n + 1):
        collection.add(" ".join(tokens[start:start + n]))
    return collection