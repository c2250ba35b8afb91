"""
slsroute.cli - Command Line Interface
=====================================

This module provides the command-line interface for slsroute using Typer,
with questionary for the interactive prompts and rich for output.

Architecture
------------
    app (main entry point)
    └── add  - Add one or more routes to a serverless project

The ``add`` command is interactive by default (route names, then one HTTP
method per route) and scriptable with flags. ``--yes`` skips every prompt.

Usage Examples
--------------
Interactive mode:
    $ slsroute add

Non-interactive mode:
    $ slsroute add "users, list orders" --method post --yes

Show help:
    $ slsroute --help
    $ slsroute add --help

See Also
--------
- generator.py: Scaffolding pipeline
- naming.py: Route name variants
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import questionary
import typer
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from slsroute import __version__
from slsroute.generator import scaffold_routes
from slsroute.models import HttpMethod, RouteDescriptor, ScaffoldConfig
from slsroute.naming import derive_route_names, parse_route_names


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="slsroute",
    help="Scaffold HTTP routes into a serverless project.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=True,
)

# Console for rich output
console = Console()

# Answer pre-filled at the route name prompt, also used with --yes
DEFAULT_ROUTE_NAMES = "route1, route2"


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]slsroute[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Route scaffolding for serverless projects[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Interactive Prompts
# =============================================================================

def prompt_route_names() -> list[str]:
    """
    Ask for one or more comma separated route names.

    Returns
    -------
    list[str]
        The trimmed, non-empty names.
    """
    answer = questionary.text(
        "Route(s) name(s): (singular or comma separated)",
        default=DEFAULT_ROUTE_NAMES,
    ).ask()

    if answer is None:
        raise typer.Abort()

    return parse_route_names(answer)


def prompt_method(route: RouteDescriptor) -> HttpMethod:
    """
    Ask which HTTP method a route answers to.

    Returns
    -------
    HttpMethod
        The selected method, ``get`` preselected.
    """
    choices = [
        questionary.Choice(title=method.value, value=method)
        for method in HttpMethod
    ]

    result = questionary.select(
        f"Route {route.slug} method:",
        choices=choices,
        default=HttpMethod.GET,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]slsroute[/] - Route scaffolding for serverless projects.

    [bold]Quick Start:[/]

        slsroute add

    [bold]Non-interactive:[/]

        slsroute add "users, orders" --method get --yes
    """


# =============================================================================
# Add Command
# =============================================================================

@app.command()
def add(
    names: Annotated[
        str | None,
        typer.Argument(
            help="Route name(s), comma separated",
        ),
    ] = None,
    method: Annotated[
        str | None,
        typer.Option(
            "--method",
            "-m",
            help="HTTP method for every route: get, post, put, delete",
        ),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option(
            "--language",
            "-l",
            help="Template language (default: from slsattributes.json, else golang)",
        ),
    ] = None,
    path: Annotated[
        Path,
        typer.Option(
            "--path",
            "-p",
            help="Path to the serverless project",
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ] = Path("."),
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip all prompts, use defaults",
        ),
    ] = False,
) -> None:
    """
    Add routes to a serverless project.

    For every route this creates:

    - [cyan]<route>/main.go[/] handler
    - [cyan]<route>/main_test.go[/] unit test
    - [cyan]<route>/event.json[/] test event
    - [cyan]<route>/Makefile[/] build file

    and registers the route in [cyan]serverless.yml[/] and the root [cyan]Makefile[/].

    [bold]Examples:[/]

        slsroute add
        slsroute add users --method post
        slsroute add "users, orders" --path ./api --yes
    """
    path = path.resolve()

    # Resolve configuration
    try:
        config = ScaffoldConfig.from_attributes_file(path, language)
    except ValueError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    # Resolve route names
    if names is not None:
        raw_names = parse_route_names(names)
    elif yes:
        raw_names = parse_route_names(DEFAULT_ROUTE_NAMES)
    else:
        raw_names = prompt_route_names()

    if not raw_names:
        rprint("[red]Error:[/] No route names given.")
        raise typer.Exit(1)

    try:
        routes = [derive_route_names(raw) for raw in raw_names]
    except ValueError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    # Resolve methods
    if method:
        try:
            resolved_method = HttpMethod(method.lower())
        except ValueError:
            valid = ", ".join(m.value for m in HttpMethod)
            rprint(f"[red]Error:[/] Invalid method '{method}'. Valid: {valid}")
            raise typer.Exit(1)
        routes = [route.with_method(resolved_method) for route in routes]
    elif yes:
        routes = [route.with_method(HttpMethod.GET) for route in routes]
    else:
        routes = [route.with_method(prompt_method(route)) for route in routes]

    # Show what is about to be generated
    console.print()
    table = Table(title="Routes", show_header=True)
    table.add_column("Route", style="cyan")
    table.add_column("Method", style="green")
    table.add_column("Handler", style="dim")

    for route in routes:
        table.add_row(route.slug, route.method.value.upper(), route.handler_path)

    console.print(table)

    # Generate
    try:
        scaffold_routes(routes, config, verbose=True)
    except (ValueError, OSError) as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
