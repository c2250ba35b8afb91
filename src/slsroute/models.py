"""
slsroute.models - Pydantic Models for Route Scaffolding
=======================================================

This module defines the data models used throughout slsroute. Pydantic gives
us validation of user input (route methods, template languages) and a single
place where the project attribute file is parsed.

Architecture Notes
------------------
The models are small and flat:

    ScaffoldConfig
    ├── language: Language (enum)
    └── project_dir: Path

    RouteDescriptor (frozen)
    ├── slug / pascal / camel: str
    └── method: HttpMethod | None

A ``RouteDescriptor`` is created once per user-supplied name by
``slsroute.naming.derive_route_names`` and never mutated afterwards; the
HTTP method is attached with ``with_method``, which returns a new copy.

Usage Example
-------------
>>> from slsroute.naming import derive_route_names
>>> route = derive_route_names("list users").with_method(HttpMethod.GET)
>>> route.handler_path
'list-users/main.go'
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# Name of the per-project attribute file written when the project was created
ATTRIBUTES_FILENAME = "slsattributes.json"


# =============================================================================
# Enumerations
# =============================================================================

class HttpMethod(str, Enum):
    """
    HTTP verbs a generated route can be triggered by.

    The values are written verbatim into the ``method:`` key of the
    serverless.yml http event, so they stay lowercase.

    Examples
    --------
    >>> HttpMethod("post")
    <HttpMethod.POST: 'post'>
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"


class Language(str, Enum):
    """
    Template sets available for route generation.

    Each value names a sub-directory of ``slsroute/templates`` holding the
    handler, test, event and Makefile templates for that runtime.
    """

    GOLANG = "golang"

    @property
    def template_dir(self) -> str:
        """Directory of this language's templates inside the templates package."""
        return self.value


# =============================================================================
# Route Descriptor
# =============================================================================

class RouteDescriptor(BaseModel):
    """
    Canonical name variants of a single route.

    All three variants render the same list of words in a different
    convention, so ``"My Route 1"`` becomes ``my-route-1`` / ``MyRoute1`` /
    ``myRoute1``. The slug doubles as the route's identity: it names the
    route directory, the binary and the http path.

    Attributes
    ----------
    slug : str
        Lowercase, hyphen-delimited, path-safe form.

    pascal : str
        Every word capitalized and concatenated.

    camel : str
        Like ``pascal`` with the first word lowercased.

    method : HttpMethod | None
        HTTP verb chosen for the route. ``None`` until the user picked one.
    """

    model_config = ConfigDict(frozen=True)

    slug: str = Field(min_length=1, description="Path-safe route name")
    pascal: str = Field(min_length=1, description="PascalCase route name")
    camel: str = Field(min_length=1, description="camelCase route name")
    method: HttpMethod | None = Field(
        default=None,
        description="HTTP method the route answers to",
    )

    def with_method(self, method: HttpMethod | str) -> RouteDescriptor:
        """
        Return a copy of this route bound to an HTTP method.

        Parameters
        ----------
        method : HttpMethod | str
            The verb, either as enum member or its lowercase value.

        Raises
        ------
        ValueError
            If ``method`` is not one of get, post, put, delete.
        """
        return self.model_copy(update={"method": HttpMethod(method)})

    @property
    def handler_path(self) -> str:
        """Handler source path relative to the project root."""
        return f"{self.slug}/main.go"

    @property
    def binary_path(self) -> str:
        """Build output path referenced by serverless.yml and the Makefile."""
        return f"bin/{self.slug}"


# =============================================================================
# Scaffold Configuration
# =============================================================================

class ScaffoldConfig(BaseModel):
    """
    Settings for one scaffolding run.

    The language is normally taken from the project's ``slsattributes.json``
    (written when the serverless project itself was generated) but can be
    overridden from the command line.

    Attributes
    ----------
    language : Language
        Template set used for the route files.

    project_dir : Path
        Root of the serverless project being extended.
    """

    language: Language = Field(
        default=Language.GOLANG,
        description="Template language for generated routes",
    )
    project_dir: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the serverless project",
    )

    @property
    def serverless_path(self) -> Path:
        """Deployment descriptor patched with one function per route."""
        return self.project_dir / "serverless.yml"

    @property
    def makefile_path(self) -> Path:
        """Root build file patched with one build line per route."""
        return self.project_dir / "Makefile"

    @classmethod
    def from_attributes_file(
        cls,
        project_dir: Path,
        language: Language | str | None = None,
    ) -> ScaffoldConfig:
        """
        Build the configuration for a project directory.

        Parameters
        ----------
        project_dir : Path
            Root of the serverless project.

        language : Language | str | None
            Explicit language. When given, the attribute file is not read.

        Returns
        -------
        ScaffoldConfig
            Validated configuration object.

        Raises
        ------
        ValueError
            If the attribute file is not valid JSON or names a language
            without templates.

        Notes
        -----
        A missing attribute file, or one without a ``language`` key, falls
        back to ``golang``.
        """
        if language is None:
            attributes = _read_attributes(project_dir / ATTRIBUTES_FILENAME)
            language = attributes.get("language") or Language.GOLANG

        try:
            return cls(language=language, project_dir=project_dir)
        except ValidationError as e:
            valid = ", ".join(lang.value for lang in Language)
            msg = f"Unsupported language '{language}'. Valid: {valid}"
            raise ValueError(msg) from e


def _read_attributes(path: Path) -> dict:
    if not path.exists():
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Invalid {path.name}: {e}"
        raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Invalid {path.name}: expected a JSON object"
        raise ValueError(msg)
    return data
