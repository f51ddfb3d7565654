import re

QUOTE_CHARS = "'\"`"
BRACKET_CHARS = "([{}])"


def trim_quote(text: str) -> str:
    """Strips quote and backtick characters from both ends of ``text``."""
    return text.strip(QUOTE_CHARS)


def trim_bracket(text: str) -> str:
    """
    Strips bracket characters from both ends of ``text``.

    Recovers the inner literal of a length clause, e.g. ``"(255)"`` -> ``"255"``.
    """
    return text.strip(BRACKET_CHARS)


def replace_all(text: str, *pairs: str) -> str:
    """
    Applies literal replacements given as ``old, new, old, new, ...``.

    All pairs are matched in one left-to-right pass, so a replacement's
    output is never matched again by a later pair.
    """
    if len(pairs) % 2:
        raise ValueError("replace_all expects an even number of arguments")
    if not pairs:
        return text
    table = dict(zip(pairs[0::2], pairs[1::2]))
    pattern = re.compile("|".join(re.escape(old) for old in sorted(table, key=len, reverse=True)))
    return pattern.sub(lambda m: table[m.group(0)], text)


def strip_control(text: str) -> str:
    """Deletes tab, carriage return and newline characters."""
    return replace_all(text, "\t", "", "\r", "", "\n", "")
