"""
Small string helpers.
"""


def capitalize(value: str) -> str:
    """
    Upper-case the first character of a string using ASCII rules only.

    Unlike ``str.capitalize`` the rest of the string is left untouched and
    non-ASCII first characters are returned as-is.

    Args:
        value: The string to capitalize.

    Returns:
        The string with its first character upper-cased.
    """
    if not value:
        return value
    first = value[0]
    return (first.upper() if first.isascii() else first) + value[1:]
