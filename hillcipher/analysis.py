from collections import Counter
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from .alphabet import ALPHABET
from .codec import normalize


def count_frequencies(text: str) -> List[Tuple[str, int]]:
    """
    Counts the letters of text (case-insensitive, non-letters ignored).
    Returns (letter, count) pairs, most common first.
    """
    return Counter(normalize(text)).most_common()


def print_frequencies(freqs: List[Tuple[str, int]]):
    total = sum(c for _, c in freqs)
    for letter, count in freqs:
        print(f"{letter}: {count:4d}  ({100.0 * count / total:5.1f}%)")


def plot_frequencies(freqs: List[Tuple[str, int]],
                     title: str = "Cipher letter frequencies",
                     out: Optional[str] = None):
    """Bar chart over the whole alphabet; saved to out if given, else shown."""
    counts = dict(freqs)
    letters = sorted(ALPHABET)
    fig, ax = plt.subplots(figsize=(10, 4))
    ax.bar(letters, [counts.get(ch, 0) for ch in letters], color="steelblue")
    ax.set_title(title)
    ax.set_xlabel("letter")
    ax.set_ylabel("count")
    if out:
        fig.savefig(out)
        plt.close(fig)
        print(f"Frequency chart saved to '{out}'.")
    else:
        plt.show()
