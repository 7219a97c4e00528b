"""Document key mapping for prefixed field and variant names."""

from collections.abc import Callable


def lower_first_uppers(s: str) -> str:
    """Lower-case the leading run of uppercase characters.

    An acronym run that is followed by a lowercase word keeps its last
    capital, so ``HTTPStatus`` becomes ``httpStatus`` and ``URL`` becomes
    ``url``.
    """
    run = 0
    while run < len(s) and s[run].isupper():
        run += 1
    if 1 < run < len(s) and s[run].islower():
        run -= 1
    return s[:run].lower() + s[run:]


def make_key_mapper(prefix: str) -> Callable[[str], str]:
    """Build the declared-name -> document-key function for a prefix.

    The prefix is dropped by length only; callers pass names that start
    with it.
    """
    size = len(prefix)

    def modifier(name: str) -> str:
        return lower_first_uppers(name[size:])

    return modifier
