"""Plagiarism detection with word n-grams, hash matching and cosine similarity."""

__version__ = "0.1.0"
__all__ = ["cli", "cosine_similarity", "file_io", "ngram", "preprocessing", "rabin_karp"]