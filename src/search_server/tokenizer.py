from collections.abc import Iterable


def split_into_words(text: str) -> list[str]:
    """Splits text on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    """A valid word contains no control characters (codes 0 to 31)."""
    return not any(ord(char) < 32 for char in word)


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    return {string for string in strings if string}
