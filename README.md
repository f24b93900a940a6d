# plagcheck

plagcheck compares two plain-text documents and estimates how similar they
are. It is a quick first check for copied or closely paraphrased text.

## How it works

1. Each document is split into words at whitespace and at the punctuation
   characters `. , ; : ! ? " ' ( ) [ ] { } -`. ASCII letters in the words are
   lower-cased; other characters are left as they are.
2. Common stop words are dropped. These are "a", "an", "the", "and", "or",
   "but", "is", "are", "was", "were", "in", "on", "at", "to", "for", "with",
   "by", "about", "of" and "from".
3. The remaining words are grouped into overlapping word 3-grams, and each
   distinct 3-gram is counted.
4. 3-grams that appear in both documents are found with a Rabin–Karp style
   hash lookup.
5. The cosine similarity of the two 3-gram count vectors gives the score, a
   number from 0 to 1.

Files are read as UTF-8; bytes that are not valid UTF-8 are replaced rather
than causing an error.

## Installation

```
pip install .
```

## Command line

```
plagcheck first.txt second.txt
```

The command reports how many tokens and unique 3-grams each document has, and
how many 3-grams of the first document also occur in the second. It then
prints a report like this:

```
===== PLAGIARISM DETECTION REPORT =====
Similarity Score: 0.85 (85.00%)
Matching n-grams: 17 out of 20

Interpretation:
HIGH SIMILARITY (85.00%): There is a very high probability of plagiarism.
=====================================
```

The score is interpreted as follows:

| Score        | Interpretation       |
|--------------|----------------------|
| 0.8 and up   | high similarity      |
| 0.5 to 0.8   | moderate similarity  |
| 0.3 to 0.5   | low similarity       |
| below 0.3    | minimal similarity   |

The command exits with status 0 after printing the report, and with status 1
in these cases:

- it is not given exactly two file names (a usage message is printed);
- a file cannot be opened or read;
- a document has fewer than three words left after stop words are removed.

## Library use

```python
from plagcheck.preprocessing import tokenize, remove_stop_words
from plagcheck.ngram import create_ngrams
from plagcheck.rabin_karp import find_matches
from plagcheck.cosine_similarity import calculate_cosine_similarity

tokens1 = remove_stop_words(tokenize("The quick brown fox jumps over the lazy dog."))
tokens2 = remove_stop_words(tokenize("A quick brown fox jumps over a sleepy cat."))

grams1 = create_ngrams(tokens1, 3)
grams2 = create_ngrams(tokens2, 3)

print(find_matches(grams1, grams2))        # indices into grams1 that also occur in grams2
print(calculate_cosine_similarity(grams1, grams2))
```

- `create_ngrams(tokens, n)` returns an `NGramCollection` and raises
  `ValueError` if `n` is not positive or there are fewer than `n` tokens.
- `NGramCollection` keeps distinct n-grams in order of first appearance.
  `len()` gives the number of distinct n-grams, iterating or indexing yields
  `(text, count)` pairs, `in` tests for a text, `count_of(text)` returns its
  count (0 if absent) and `add(text)` records one more occurrence.
- `rabin_karp.rolling_hash(text)` is the hash used for matching: the UTF-8
  bytes of the text as a base-256 number modulo 101.
- `calculate_cosine_similarity` returns 0.0 if either collection is empty.
- `plagcheck.file_io.read_file` reads a document from disk and raises
  `OSError` if it cannot.
- `plagcheck.cli.format_report(similarity, matches, total_ngrams)` builds the
  report text, and `plagcheck.cli.interpret(similarity)` builds the
  interpretation line on its own.

## Running the tests

```
pip install .[test]
pytest
```