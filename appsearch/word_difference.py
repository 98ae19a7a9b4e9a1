"""
Word-prefix matching between an app label and a user query.

get_word_difference(label, query) -> int
    NAME_NO_MATCH when the query is not a prefix of any word in the label,
    otherwise len(label) - len(query). Smaller means closer.
"""

NAME_NO_MATCH = -1


def _is_word_character(ch: str) -> bool:
    return ch.isalnum()


def _word_starts(label: str):
    """Yield every index in ``label`` at which a word begins."""
    n = len(label)
    i = 0
    while i < n:
        yield i
        while i < n and _is_word_character(label[i]):
            i += 1
        while i < n and not _is_word_character(label[i]):
            i += 1


def get_word_difference(label: str, query: str) -> int:
    """
    Compare ``query`` against each word start of ``label``, case-insensitively.

    Examples:
      ("Calculator", "calc") -> 6
      ("Google Play Store", "play") -> 13
      ("Calendar", "calc") -> NAME_NO_MATCH
    """
    if not label or not query:
        return NAME_NO_MATCH

    label_l = label.lower()
    query_l = query.lower()
    if len(query_l) > len(label_l):
        return NAME_NO_MATCH

    for start in _word_starts(label_l):
        if label_l.startswith(query_l, start):
            return len(label_l) - len(query_l)
    return NAME_NO_MATCH


def is_match(word_diff: int) -> bool:
    return word_diff != NAME_NO_MATCH
