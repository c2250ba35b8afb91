"""
slsroute.generator - Route Scaffolding Pipeline
===============================================

This module adds routes to an existing serverless project. It renders the
per-route templates, registers each route in ``serverless.yml`` and the
root ``Makefile``, and reports what happened on the console.

Architecture
------------
For every route the pipeline runs:

    1. Skip the route if ``<slug>/main.go`` already exists
    2. Render handler, test and event templates with Jinja2
    3. Insert the route's blocks above the hook marker of both files
    4. (Re)render the per-route Makefile

Nothing touches the disk until every route has rendered. ``serverless.yml``
and ``Makefile`` are read once up front (line endings preserved), patched in
memory, and written back before the route files, only if they changed. A
failure while writing route files therefore never leaves a generated route
unregistered; the next run recreates the missing files. Running the same
command twice leaves both files exactly as after the first run.

Usage Example
-------------
>>> from slsroute.generator import scaffold_routes
>>> from slsroute.models import HttpMethod, ScaffoldConfig
>>> from slsroute.naming import derive_route_names
>>>
>>> config = ScaffoldConfig.from_attributes_file(Path("."))
>>> route = derive_route_names("users").with_method(HttpMethod.GET)
>>> result = scaffold_routes([route], config)
>>> result.created
['users']

See Also
--------
- patcher.py: Marker insertion and block builders
- templates/: Jinja2 template files
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, select_autoescape
from rich.console import Console
from rich.panel import Panel

from slsroute import __version__
from slsroute.patcher import (
    HOOK_MARKER,
    insert_before_marker,
    makefile_block,
    match_line_endings,
    read_document,
    serverless_block,
    write_document,
)


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from slsroute.models import RouteDescriptor, ScaffoldConfig


# =============================================================================
# Module-Level Configuration
# =============================================================================

# Console for rich output
console = Console()

# Template name -> output path pattern, rendered only for new routes
ROUTE_TEMPLATES: dict[str, str] = {
    "main.go.j2": "{slug}/main.go",
    "main_test.go.j2": "{slug}/main_test.go",
    "event.json.j2": "{slug}/event.json",
}

# Rendered for every route on every run, existing or not
ROUTE_BUILD_TEMPLATES: dict[str, str] = {
    "Makefile.j2": "{slug}/Makefile",
}


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class ScaffoldResult:
    """
    Outcome of a scaffolding run.

    Attributes
    ----------
    project_path : Path
        Root of the project that was extended.

    created : list[str]
        Slugs of routes generated in this run.

    skipped : list[str]
        Slugs of routes that already existed.

    files_created : list[Path]
        Every file written from a template.

    files_patched : list[Path]
        Hooked files (serverless.yml, Makefile) that were modified.

    warnings : list[str]
        Non-fatal problems, such as a missing hook marker.
    """

    project_path: Path
    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    files_created: list[Path] = field(default_factory=list)
    files_patched: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# =============================================================================
# Template Engine Setup
# =============================================================================


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment for route templates.

    Autoescaping is disabled since the output is source code, JSON and
    Makefiles, never HTML.
    """
    return Environment(
        loader=PackageLoader("slsroute", "templates"),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(
    env: Environment,
    template_name: str,
    route: RouteDescriptor,
    config: ScaffoldConfig,
) -> str:
    """
    Render one route template of the configured language.

    Parameters
    ----------
    env : Environment
        The Jinja2 environment to use for rendering.

    template_name : str
        Template file name inside the language directory (e.g. "main.go.j2").

    route : RouteDescriptor
        Route being generated.

    config : ScaffoldConfig
        Run configuration; selects the language directory.

    Returns
    -------
    str
        The rendered template content.

    Raises
    ------
    jinja2.TemplateNotFound
        If the language has no such template.
    """
    template = env.get_template(f"{config.language.template_dir}/{template_name}")
    return template.render(
        route=route,
        config=config,
        slsroute_version=__version__,
    )


def render_route_files(
    env: Environment,
    route: RouteDescriptor,
    config: ScaffoldConfig,
    templates: dict[str, str],
) -> dict[Path, str]:
    """
    Render a set of templates for a route.

    Returns
    -------
    dict[Path, str]
        Output paths (relative to the project root) mapped to content.
    """
    return {
        Path(output_pattern.format(slug=route.slug)): render_template(
            env, template_name, route, config
        )
        for template_name, output_pattern in templates.items()
    }


# =============================================================================
# File Writing
# =============================================================================


def write_files(project_dir: Path, files: dict[Path, str]) -> list[Path]:
    """
    Write rendered files below the project directory.

    Parent directories are created as needed and existing files are
    overwritten.

    Returns
    -------
    list[Path]
        Absolute paths of the written files.
    """
    written: list[Path] = []

    for relative_path, content in files.items():
        full_path = project_dir / relative_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
        written.append(full_path)

    return written


def read_hooked_file(path: Path) -> str:
    """
    Read a file the routes get registered in.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist, with a hint about the expected project.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"No {path.name} found at {path.parent}. "
            "Run slsroute from the root of a serverless project."
        )
    return read_document(path)


# =============================================================================
# Validation
# =============================================================================


def check_routes(routes: Sequence[RouteDescriptor]) -> None:
    """
    Ensure a batch of routes can be generated together.

    Raises
    ------
    ValueError
        If the batch is empty, a route has no HTTP method, or two routes
        share a slug (they would overwrite each other's files).
    """
    if not routes:
        raise ValueError("No routes given.")

    missing = [route.slug for route in routes if route.method is None]
    if missing:
        raise ValueError(f"No HTTP method selected for: {', '.join(missing)}")

    counts = Counter(route.slug for route in routes)
    duplicates = [slug for slug, count in counts.items() if count > 1]
    if duplicates:
        raise ValueError(
            f"Route names resolve to the same slug: {', '.join(duplicates)}"
        )


# =============================================================================
# Main Scaffolding Function
# =============================================================================


def _register(
    document: str,
    block: str,
    path: Path,
    route: RouteDescriptor,
    result: ScaffoldResult,
) -> str:
    block = match_line_endings(document, block)
    patched = insert_before_marker(document, HOOK_MARKER, block)
    if patched is not None:
        return patched

    # Unchanged without the block present means the marker is missing
    if block not in document:
        result.warnings.append(
            f"Hook marker '{HOOK_MARKER}' not found in {path.name}; "
            f"route {route.slug} was not registered there"
        )
    return document


def scaffold_routes(
    routes: Iterable[RouteDescriptor],
    config: ScaffoldConfig,
    *,
    verbose: bool = True,
) -> ScaffoldResult:
    """
    Generate route files and register the routes in the project.

    Parameters
    ----------
    routes : Iterable[RouteDescriptor]
        Routes to add, each with its HTTP method selected.

    config : ScaffoldConfig
        Project directory and template language.

    verbose : bool, default=True
        If True, display progress information on the console.

    Returns
    -------
    ScaffoldResult
        What was created, skipped and patched.

    Raises
    ------
    ValueError
        If the routes fail ``check_routes``.
    FileNotFoundError
        If serverless.yml or Makefile is missing from the project.
    OSError
        If a file cannot be written. Hooked files are written first, so
        every route registered so far is complete after a re-run.
    """
    routes = list(routes)
    check_routes(routes)

    project_dir = config.project_dir
    serverless_path = config.serverless_path
    makefile_path = config.makefile_path

    original_serverless = read_hooked_file(serverless_path)
    original_makefile = read_hooked_file(makefile_path)
    serverless_doc = original_serverless
    makefile_doc = original_makefile

    env = create_jinja_env()
    result = ScaffoldResult(project_path=project_dir)
    rendered: dict[Path, str] = {}

    if verbose:
        console.print()
        console.print(
            Panel(
                f"[bold blue]Adding routes:[/] [green]{', '.join(r.slug for r in routes)}[/]\n"
                f"[dim]Language: {config.language.value} | Project: {project_dir}[/]",
                title="[bold]slsroute[/]",
                border_style="blue",
            )
        )
        console.print()

    # Step 1: Render everything in memory
    for route in routes:
        if (project_dir / route.handler_path).exists():
            result.skipped.append(route.slug)
            if verbose:
                console.print(f"  [yellow]⚠[/] Route {route.slug} already exists")
        else:
            rendered.update(render_route_files(env, route, config, ROUTE_TEMPLATES))
            result.created.append(route.slug)

            serverless_doc = _register(
                serverless_doc, serverless_block(route), serverless_path, route, result
            )
            makefile_doc = _register(
                makefile_doc, makefile_block(route), makefile_path, route, result
            )

            if verbose:
                console.print(
                    f"  [green]✓[/] Route {route.slug} "
                    f"[dim]({route.method.value.upper()} /{route.slug})[/]"
                )

        rendered.update(render_route_files(env, route, config, ROUTE_BUILD_TEMPLATES))

    # Step 2: Register the routes
    for path, original, patched in (
        (serverless_path, original_serverless, serverless_doc),
        (makefile_path, original_makefile, makefile_doc),
    ):
        if patched != original:
            write_document(path, patched)
            result.files_patched.append(path)

    # Step 3: Write route files
    result.files_created.extend(write_files(project_dir, rendered))

    if verbose:
        console.print()
        for path in result.files_patched:
            console.print(f"  Updated {path.relative_to(project_dir)}")
        for warning in result.warnings:
            console.print(f"  [yellow]⚠[/] {warning}")
        console.print()
        console.print(
            Panel(
                f"[bold green]{len(result.created)} route(s) created[/], "
                f"{len(result.skipped)} skipped\n\n"
                "[bold]Next steps:[/]\n"
                "  make\n"
                "  sls deploy",
                title="[bold green]Done[/]",
                border_style="green",
            )
        )

    return result
