"""Command line plagiarism check comparing two documents."""

import sys

from plagcheck.cosine_similarity import calculate_cosine_similarity
from plagcheck.file_io import read_file
from plagcheck.ngram import create_ngrams
from plagcheck.preprocessing import remove_stop_words, tokenize
from plagcheck.rabin_karp import find_matches

NGRAM_SIZE = 3

USAGE = (
    "Usage: plagcheck <file1> <file2>\n"
    "Example: plagcheck data/doc1.txt data/doc2.txt"
)


def interpret(similarity):
    """Describe what a similarity score suggests."""
    percent = similarity * 100
    if similarity >= 0.8:
        return (
            f"HIGH SIMILARITY ({percent:.2f}%): "
            "There is a very high probability of plagiarism."
        )
    if similarity >= 0.5:
        return (
            f"MODERATE SIMILARITY ({percent:.2f}%): "
            "There may be some copied content or similar phrasing."
        )
    if similarity >= 0.3:
        return (
            f"LOW SIMILARITY ({percent:.2f}%): "
            "Some similarities exist, but likely not plagiarism."
        )
    return (
        f"MINIMAL SIMILARITY ({percent:.2f}%): "
        "The documents appear to be original."
    )


def format_report(similarity, matches, total_ngrams):
    """Build the text of the final report."""
    return (
        "\n===== PLAGIARISM DETECTION REPORT =====\n"
        f"Similarity Score: {similarity:.2f} ({similarity * 100:.2f}%)\n"
        f"Matching n-grams: {matches} out of {total_ngrams}\n"
        "\nInterpretation:\n"
        f"{interpret(similarity)}\n"
        "=====================================\n"
    )


def _read(filename):
    try:
        return read_file(filename)
    except OSError:
        print(f"Error opening file: {filename}")
        return None


def main(argv=None):
    """Compare two documents and print a similarity report."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(USAGE)
        return 1

    name1, name2 = args
    text1 = _read(name1)
    text2 = _read(name2)
    if text1 is None or text2 is None:
        print("Error reading files")
        return 1

    print(f"Processing document 1: {name1}")
    print(f"Processing document 2: {name2}")

    tokens1 = remove_stop_words(tokenize(text1))
    tokens2 = remove_stop_words(tokenize(text2))
    print(f"Document 1: {len(tokens1)} tokens after preprocessing")
    print(f"Document 2: {len(tokens2)} tokens after preprocessing")

    try:
        ngrams1 = create_ngrams(tokens1, NGRAM_SIZE)
        ngrams2 = create_ngrams(tokens2, NGRAM_SIZE)
    except ValueError:
        print("Error creating n-grams")
        return 1

    print(f"Document 1: {len(ngrams1)} unique {NGRAM_SIZE}-grams")
    print(f"Document 2: {len(ngrams2)} unique {NGRAM_SIZE}-grams")

    matches = find_matches(ngrams1, ngrams2)
    print(f"Found {len(matches)} matching n-grams")

    similarity = calculate_cosine_similarity(ngrams1, ngrams2)
    print(format_report(similarity, len(matches), len(ngrams1)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())