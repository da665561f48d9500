"""Identifier normalization for generated Go code."""

import re

ACRONYMS = re.compile(r"^(id|uuid)$", re.IGNORECASE)


def format_name(name: str) -> str:
    """Turn a GraphQL identifier into an exported Go identifier.

    ``id`` and ``uuid`` (any case) become upper-case acronyms. Other names lose
    one leading and one trailing underscore, then every underscore-separated
    segment is capitalized:

        >>> format_name("user_name")
        'UserName'
        >>> format_name("_private_")
        'Private'
        >>> format_name("Id")
        'ID'
    """
    if ACRONYMS.match(name):
        return name.upper()
    if name.startswith("_"):
        name = name[1:]
    if name.endswith("_"):
        name = name[:-1]
    return "".join(word[:1].upper() + word[1:] for word in name.split("_"))
