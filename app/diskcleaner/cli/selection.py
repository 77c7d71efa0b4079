"""Selection parsing for the interactive clean flow.

Users pick rows by their 1-based index as shown in the entries table:
``1,3,5-7`` selects rows 1, 3, 5, 6 and 7, ``all`` selects every row and
an empty answer selects nothing.
"""

ALL_KEYWORD = "all"


def _parse_index(token: str, count: int) -> int:
    try:
        index = int(token)
    except ValueError:
        msg = f"'{token}' is not a number"
        raise ValueError(msg) from None
    if not 1 <= index <= count:
        msg = f"{index} is out of range (1-{count})"
        raise ValueError(msg)
    return index - 1


def parse_selection(text: str, count: int) -> list[int]:
    """Parse a selection expression into sorted, unique 0-based indices.

    Args:
        text: Selection such as "1,3,5-7", "all" or "".
        count: Number of selectable rows.

    Returns:
        Sorted list of 0-based row indices.

    Raises:
        ValueError: If the expression is malformed or out of range.
    """
    text = text.strip()
    if not text:
        return []
    if text.lower() == ALL_KEYWORD:
        return list(range(count))

    selected: set[int] = set()
    for raw_token in text.split(","):
        token = raw_token.strip()
        if not token:
            continue
        if "-" in token:
            start_text, _, end_text = token.partition("-")
            start = _parse_index(start_text.strip(), count)
            end = _parse_index(end_text.strip(), count)
            if start > end:
                msg = f"Range '{token}' is reversed"
                raise ValueError(msg)
            selected.update(range(start, end + 1))
        else:
            selected.add(_parse_index(token, count))

    return sorted(selected)
