"""Text sanitization helpers."""


def remove_unrecognized_chars(value: str, encoding: str = "euc_kr") -> str:
    """Drop every character that ``encoding`` cannot represent.

    Order of the remaining characters is preserved.  The default
    encoding keeps ASCII and Hangul while stripping emoji and other
    symbols legacy Korean systems reject.
    """
    kept = []
    for char in value:
        try:
            char.encode(encoding)
        except UnicodeEncodeError:
            continue
        kept.append(char)
    return "".join(kept)
