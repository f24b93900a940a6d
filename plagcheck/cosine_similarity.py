"""Cosine similarity between n-gram count vectors."""

import math


def calculate_cosine_similarity(collection1, collection2):
    """Return the cosine similarity of two n-gram collections, between 0 and 1.

    An empty collection on either side gives 0.0.
    """
    dot_product = sum(
        count * collection2.count_of(text)
        for text, count in collection1
    )
    magnitude1 = math.sqrt(sum(count * count for _, count in collection1))
    magnitude2 = math.sqrt(sum(count * count for _, count in collection2))
    if magnitude1 == 0.0 or magnitude2 == 0.0:
        return 0.0
    return dot_product / (magnitude1 * magnitude2)