"""
slsroute - Route Scaffolding for Serverless Projects
====================================================

A CLI tool that adds HTTP routes to an existing serverless project: it
generates the handler, its unit test and an event fixture for each route,
and registers the route in ``serverless.yml`` and the root ``Makefile``.

Quick Start
-----------
```bash
# Inside a serverless project
slsroute add "users, list orders" --method get

# Or interactively
slsroute add
```

Example
-------
>>> from pathlib import Path
>>> from slsroute import HttpMethod, ScaffoldConfig, derive_route_names, scaffold_routes
>>> route = derive_route_names("list orders").with_method(HttpMethod.GET)
>>> scaffold_routes([route], ScaffoldConfig.from_attributes_file(Path(".")))

Architecture
------------
- ``cli``: Typer-based command line interface
- ``generator``: Template rendering and the scaffolding pipeline
- ``patcher``: Idempotent insertion of route blocks at the hook marker
- ``naming``: Slug, PascalCase and camelCase route names
- ``models``: Pydantic models for routes and run configuration
- ``templates``: Jinja2 templates per language
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from slsroute.generator import ScaffoldResult, scaffold_routes
from slsroute.models import HttpMethod, Language, RouteDescriptor, ScaffoldConfig
from slsroute.naming import derive_route_names, parse_route_names
from slsroute.patcher import HOOK_MARKER, insert_before_marker, patch_file


__all__ = [
    "HOOK_MARKER",
    "HttpMethod",
    "Language",
    "RouteDescriptor",
    "ScaffoldConfig",
    "ScaffoldResult",
    "__version__",
    "derive_route_names",
    "insert_before_marker",
    "parse_route_names",
    "patch_file",
    "scaffold_routes",
]
