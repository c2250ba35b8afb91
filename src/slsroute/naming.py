"""
slsroute.naming - Route Name Variants
=====================================

Turns the free text typed at the route prompt into the name variants the
templates need. Words are runs of ASCII letters and digits, additionally
split at camelCase, ACRONYMWord and letter-to-digit boundaries, so every
variant is built from the same word list and splits back into it:

>>> route = derive_route_names("My Route 1")
>>> route.slug, route.pascal, route.camel
('my-route-1', 'MyRoute1', 'myRoute1')
"""

from __future__ import annotations

import re

from slsroute.models import RouteDescriptor


# lowerUpper, ACRONYMWord and letter-digit boundaries
_CAMEL_BOUNDARY = re.compile(
    r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[A-Za-z])(?=[0-9])"
)
_WORD = re.compile(r"[A-Za-z0-9]+")


def split_words(raw_name: str) -> list[str]:
    """
    Split a route name into lowercase words.

    Examples
    --------
    >>> split_words("getUserByID")
    ['get', 'user', 'by', 'id']
    >>> split_words("  HTTPServer_status ")
    ['http', 'server', 'status']
    """
    spaced = _CAMEL_BOUNDARY.sub(" ", raw_name)
    return [word.lower() for word in _WORD.findall(spaced)]


def derive_route_names(raw_name: str) -> RouteDescriptor:
    """
    Derive the slug, PascalCase and camelCase forms of a route name.

    The returned descriptor has no HTTP method yet; the caller attaches one
    with ``RouteDescriptor.with_method`` once the user picked it.

    Parameters
    ----------
    raw_name : str
        Arbitrary text, may contain spaces, punctuation and mixed case.

    Returns
    -------
    RouteDescriptor
        The three name variants.

    Raises
    ------
    ValueError
        If the name holds no letters or digits at all.
    """
    words = split_words(raw_name)
    if not words:
        msg = f"Route name '{raw_name}' contains no letters or digits."
        raise ValueError(msg)

    pascal = "".join(word.capitalize() for word in words)
    return RouteDescriptor(
        slug="-".join(words),
        pascal=pascal,
        camel=words[0] + pascal[len(words[0]):],
    )


def parse_route_names(answer: str) -> list[str]:
    """
    Split a comma separated prompt answer into individual route names.

    Blank entries (``"a,,b"`` or a trailing comma) are dropped.
    """
    return [name.strip() for name in answer.split(",") if name.strip()]
