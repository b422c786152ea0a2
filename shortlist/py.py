from typing import Any


def cutoff_str(in_str: Any, length: int = 2000, suffix: str = " ..."):
    """
    Converts ``in_str`` to string and cuts off + appends suffix if too long.
    """
    # Keywords: Truncate, trim, max length

    in_str = str(in_str)
    length = max(length, len(suffix))
    length -= len(suffix)
    return in_str[:length] + (in_str[length:] and suffix)


def display(val: Any):
    """
    Produces a string representation of the input. For string, in particular, the string representation includes single quotes.
    """
    return str([val])[1:-1]
