#!/usr/bin/env python3
"""
Text Similarity - Term-weighted overlap between two free-text blobs.

Used for role/summary alignment between a posting (role + description) and
a candidate (summary + experience narrative).

Formula:
    tf(t, d)    = count of t in d (stop words are not counted)
    idf(t)      = 1 + ln(N / (1 + df(t)))          N = 2 (just these two documents)
    w(t, d)     = tf(t, d) * idf(t)
    raw         = sum over T of w(t, 0) * w(t, 1)  T = union of tokens of both texts
    similarity  = clamp(raw / (|T| * 0.5), 0, 1) * 100

This is a weighted term overlap, not a cosine similarity: there is no
magnitude normalization. Downstream weights and recommendation thresholds
were tuned against this exact shape, so it must not be "corrected".
"""

import re
from collections import Counter
from typing import Dict, List

import numpy as np

_TOKEN_RE = re.compile(r"\w+")

# Stop-word list of the TF-IDF implementation the weights were tuned with.
# Stop words still count towards |T| but never contribute to the raw sum.
STOP_WORDS = frozenset([
    'about', 'above', 'after', 'again', 'all', 'also', 'am', 'an', 'and', 'another',
    'any', 'are', 'as', 'at', 'be', 'because', 'been', 'before', 'being', 'below',
    'between', 'both', 'but', 'by', 'came', 'can', 'cannot', 'come', 'could', 'did',
    'do', 'does', 'doing', 'during', 'each', 'few', 'for', 'from', 'further', 'get',
    'got', 'has', 'had', 'he', 'have', 'her', 'here', 'him', 'himself', 'his', 'how',
    'if', 'in', 'into', 'is', 'it', 'its', 'itself', 'like', 'make', 'many', 'me',
    'might', 'more', 'most', 'much', 'must', 'my', 'myself', 'never', 'now', 'of',
    'on', 'only', 'or', 'other', 'our', 'ours', 'ourselves', 'out', 'over', 'own',
    'said', 'same', 'see', 'should', 'since', 'so', 'some', 'still', 'such', 'take',
    'than', 'that', 'the', 'their', 'theirs', 'them', 'themselves', 'then', 'there',
    'these', 'they', 'this', 'those', 'through', 'to', 'too', 'under', 'until', 'up',
    'very', 'was', 'way', 'we', 'well', 'were', 'what', 'where', 'when', 'which',
    'while', 'who', 'whom', 'with', 'would', 'why', 'you', 'your', 'yours',
    'yourself',
    'a', 'b', 'c', 'd', 'e', 'f', 'g', 'h', 'i', 'j', 'k', 'l', 'm', 'n', 'o', 'p',
    'q', 'r', 's', 't', 'u', 'v', 'w', 'x', 'y', 'z',
    '$', '1', '2', '3', '4', '5', '6', '7', '8', '9', '0', '_',
])

CORPUS_SIZE = 2
NORMALIZATION_FACTOR = 0.5


def tokenize(text: str) -> List[str]:
    """Lower-case word tokens; punctuation and whitespace are separators."""
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower())


def term_frequencies(tokens: List[str]) -> Dict[str, int]:
    return Counter(t for t in tokens if t not in STOP_WORDS)


def calculate_text_similarity(text1: str, text2: str) -> float:
    """
    Calculate term-weighted similarity between two texts.

    Args:
        text1: Posting text (role + description)
        text2: Candidate text (summary + experience narrative)

    Returns:
        Similarity percentage (0.0-100.0); 0.0 when either text has no tokens
    """
    tokens1 = tokenize(text1)
    tokens2 = tokenize(text2)
    if not tokens1 or not tokens2:
        return 0.0

    tf1 = term_frequencies(tokens1)
    tf2 = term_frequencies(tokens2)

    terms = sorted(set(tokens1) | set(tokens2))

    counts = np.array([[tf1.get(t, 0) for t in terms],
                       [tf2.get(t, 0) for t in terms]], dtype=float)
    document_frequency = (counts > 0).sum(axis=0)
    idf = 1.0 + np.log(CORPUS_SIZE / (1.0 + document_frequency))

    weighted = counts * idf
    raw = float(np.dot(weighted[0], weighted[1]))

    normalized = raw / (len(terms) * NORMALIZATION_FACTOR)
    return min(max(normalized, 0.0), 1.0) * 100.0
