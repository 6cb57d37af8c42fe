"""Text Analyzer: word and character statistics for a string.

Invariants:
    - Tokens are whitespace-separated runs; empty tokens never exist
    - character_count == sum of token lengths
    - character_count_with_spaces == len(text), punctuation stripping or not
    - longest_word is the LAST of the longest tokens ("Hello world" -> "world");
      "" when there are no tokens
    - average_word_length is rounded to 2 places, 0.0 when there are no tokens

Design Decisions:
    - Punctuation is kept by default; strip_punctuation=True trims
      string.punctuation from both ends of each token and drops tokens
      that become empty
"""

import string
from dataclasses import dataclass


@dataclass(frozen=True)
class TextAnalysis:
    """Statistics for one analyzed text."""
    word_count: int = 0
    character_count: int = 0
    character_count_with_spaces: int = 0
    longest_word: str = ""
    average_word_length: float = 0.0

    def to_dict(self) -> dict:
        return {
            "word_count": self.word_count,
            "character_count": self.character_count,
            "character_count_with_spaces": self.character_count_with_spaces,
            "longest_word": self.longest_word,
            "average_word_length": self.average_word_length,
        }


def tokenize(text: str, strip_punctuation: bool = False) -> list[str]:
    """Split on whitespace runs, optionally trimming edge punctuation."""
    tokens = text.split()
    if strip_punctuation:
        tokens = [t.strip(string.punctuation) for t in tokens]
        tokens = [t for t in tokens if t]
    return tokens


def analyze_text(text: str, strip_punctuation: bool = False) -> TextAnalysis:
    words = tokenize(text, strip_punctuation)
    if not words:
        return TextAnalysis(character_count_with_spaces=len(text))

    character_count = sum(len(w) for w in words)
    longest = ""
    for word in words:
        # >= so the later word wins ties
        if len(word) >= len(longest):
            longest = word
    return TextAnalysis(
        word_count=len(words),
        character_count=character_count,
        character_count_with_spaces=len(text),
        longest_word=longest,
        average_word_length=round(character_count / len(words), 2),
    )
