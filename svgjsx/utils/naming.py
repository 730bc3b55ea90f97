"""Identifier casing helpers."""
from typing import Optional

# Checked in order; the first delimiter found wins.
DELIMITERS = ("_", "-")


def capitalize(segment: str) -> str:
    """
    Uppercase the first character and leave the rest untouched.

    Unlike ``str.capitalize`` the remainder is not lowercased, so
    ``"closeAll"`` becomes ``"CloseAll"`` rather than ``"Closeall"``.
    """
    return segment[:1].upper() + segment[1:]


def find_delimiter(name: str) -> Optional[str]:
    """Return the first delimiter present in ``name``, or None."""
    for delimiter in DELIMITERS:
        if delimiter in name:
            return delimiter
    return None


def string_to_camel_case(name: str) -> str:
    """
    Convert a file base name to a PascalCase component name.

    Only one delimiter style is honored: underscores take precedence over
    hyphens, so ``"foo_bar-baz"`` becomes ``"FooBar-baz"``.

    Examples:
        >>> string_to_camel_case("icon-close")
        'IconClose'
        >>> string_to_camel_case("arrow_left")
        'ArrowLeft'
        >>> string_to_camel_case("icon")
        'Icon'
    """
    delimiter = find_delimiter(name)
    if delimiter is None:
        return capitalize(name)
    return "".join(capitalize(segment) for segment in name.split(delimiter))
