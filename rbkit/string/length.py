def length(s: str) -> int:
    """Number of characters (code points) in `s`."""
    return len(s)


def size(s: str) -> int:
    return length(s)


def count(s: str) -> int:
    return length(s)
