"""
slsroute.patcher - Marker-Based File Patching
=============================================

Generated projects carry a sentinel comment line in ``serverless.yml`` and
in the root ``Makefile``. New routes are registered by inserting a block of
text right above that line, which keeps the marker in place for the next
run.

Insertion is idempotent: a block that already occurs anywhere in the file
is not inserted again.

Known Limitations
-----------------
The duplicate check is plain substring containment. A route entry that was
reformatted by hand is not recognized as the same route, and a block that
happens to be a substring of an unrelated, larger entry counts as present.

Usage Example
-------------
>>> doc = "functions:\\n### yeoman hook ###\\n"
>>> insert_before_marker(doc, HOOK_MARKER, "  hello:\\n")
'functions:\\n  hello:\\n### yeoman hook ###\\n'
>>> insert_before_marker("functions:\\n  hello:\\n", HOOK_MARKER, "  hello:\\n") is None
True
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path

    from slsroute.models import RouteDescriptor


# Sentinel line shipped in the serverless.yml and Makefile project templates
HOOK_MARKER = "### yeoman hook ###"

MAKEFILE_BUILD_COMMAND = "GOARCH=amd64 GOOS=linux go build -gcflags='-N -l'"


# =============================================================================
# Core Insertion
# =============================================================================

def insert_before_marker(document: str, marker: str, block: str) -> str | None:
    """
    Insert ``block`` immediately before the first occurrence of ``marker``.

    Parameters
    ----------
    document : str
        Full text of the file being patched.

    marker : str
        Literal anchor; expected to occur exactly once in ``document``.

    block : str
        Text to insert, including its trailing newline.

    Returns
    -------
    str | None
        The patched document, or ``None`` when nothing changed: either the
        block is already present or the marker is missing.
    """
    if block in document:
        return None

    index = document.find(marker)
    if index == -1:
        return None

    return document[:index] + block + document[index:]


# =============================================================================
# Block Builders
# =============================================================================

def serverless_block(route: RouteDescriptor) -> str:
    """
    Build the ``functions:`` entry for a route in serverless.yml.

    The entry wires ``bin/<slug>`` to an http event on path ``<slug>`` with
    CORS enabled.

    Raises
    ------
    ValueError
        If the route has no method yet.
    """
    if route.method is None:
        msg = f"Route '{route.slug}' has no HTTP method selected."
        raise ValueError(msg)

    return (
        f"  {route.slug}:\n"
        f"    handler: {route.binary_path}\n"
        "    events:\n"
        "      - http:\n"
        f"          path: {route.slug}\n"
        f"          method: {route.method.value}\n"
        "          cors: true\n"
    )


def makefile_block(route: RouteDescriptor) -> str:
    """Build the cross-compile line for a route in the root Makefile."""
    return f"\t{MAKEFILE_BUILD_COMMAND} -o {route.binary_path} {route.handler_path}\n"


# =============================================================================
# File Helpers
# =============================================================================

def match_line_endings(document: str, block: str) -> str:
    """
    Rewrite ``block`` to use the line endings of ``document``.

    Generated blocks use ``\\n``; a document containing ``\\r\\n`` gets its
    blocks converted so the file keeps a single line ending style.

    Examples
    --------
    >>> match_line_endings("a\\r\\nb\\r\\n", "  foo:\\n")
    '  foo:\\r\\n'
    """
    if "\r\n" not in document:
        return block
    return block.replace("\r\n", "\n").replace("\n", "\r\n")


def read_document(path: Path) -> str:
    """
    Read a text file without newline translation.

    Raises
    ------
    FileNotFoundError
        If ``path`` doesn't exist.
    """
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def write_document(path: Path, document: str) -> None:
    """Write a text file exactly as given, without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(document)


def patch_file(path: Path, marker: str, block: str) -> bool:
    """
    Insert a single block into a file on disk.

    Standalone helper for one-off edits from scripts; ``scaffold_routes``
    patches its files in memory instead, so that a whole batch of routes is
    written once. The block is adapted to the file's line endings and every
    other byte of the file is preserved. The file is only rewritten when its
    content changed.

    Returns
    -------
    bool
        True if the block was inserted.

    Raises
    ------
    FileNotFoundError
        If ``path`` doesn't exist.
    """
    document = read_document(path)
    patched = insert_before_marker(
        document, marker, match_line_endings(document, block)
    )
    if patched is None:
        return False

    write_document(path, patched)
    return True
