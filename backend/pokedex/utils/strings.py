"""String manipulation utilities."""

# Line breaks that PokeAPI flavor texts carry over from the game cartridges
_LINE_BREAKS = ("\n", "\r", "\f")


def normalize_text(value: str) -> str:
    """Collapse line breaks and whitespace runs into single spaces.

    Newlines, carriage returns and form feeds become spaces, then every run
    of whitespace is collapsed to one space and the ends are trimmed.
    Applying it twice gives the same result as applying it once.

    Args:
        value: Text to normalize

    Returns:
        Normalized text

    Examples:
        >>> normalize_text("A\\nB\\x0cC")
        "A B C"
        >>> normalize_text("Word1   Word2")
        "Word1 Word2"
    """
    for line_break in _LINE_BREAKS:
        value = value.replace(line_break, " ")
    return " ".join(value.split())
