"""
pytest configuration and shared fixtures for slsroute tests.

Fixtures
--------
serverless_yml : str
    A serverless.yml with the hook marker under ``functions:``.

root_makefile : str
    A root Makefile with the hook marker inside the build target.

project_dir : Path
    A temporary serverless project containing both files.
"""

import json
from pathlib import Path

import pytest

from slsroute.models import HttpMethod, RouteDescriptor
from slsroute.naming import derive_route_names


@pytest.fixture
def serverless_yml() -> str:
    """Provide a freshly generated serverless.yml."""
    return (
        "service: demo\n"
        "\n"
        "provider:\n"
        "  name: aws\n"
        "  runtime: go1.x\n"
        "\n"
        "package:\n"
        "  exclude:\n"
        "    - ./**\n"
        "  include:\n"
        "    - ./bin/**\n"
        "\n"
        "functions:\n"
        "### yeoman hook ###\n"
    )


@pytest.fixture
def root_makefile() -> str:
    """Provide a freshly generated root Makefile."""
    return (
        ".PHONY: build clean\n"
        "\n"
        "build:\n"
        "### yeoman hook ###\n"
        "\n"
        "clean:\n"
        "\trm -rf ./bin\n"
    )


@pytest.fixture
def project_dir(tmp_path: Path, serverless_yml: str, root_makefile: str) -> Path:
    """
    Create a serverless project ready to receive routes.

    Returns
    -------
    Path
        Root of the project.
    """
    project = tmp_path / "demo"
    project.mkdir()
    (project / "serverless.yml").write_text(serverless_yml, encoding="utf-8")
    (project / "Makefile").write_text(root_makefile, encoding="utf-8")
    (project / "slsattributes.json").write_text(
        json.dumps({"language": "golang"}), encoding="utf-8"
    )
    return project


@pytest.fixture
def users_route() -> RouteDescriptor:
    """A GET route named 'users'."""
    return derive_route_names("users").with_method(HttpMethod.GET)


@pytest.fixture
def orders_route() -> RouteDescriptor:
    """A POST route named 'list orders'."""
    return derive_route_names("list orders").with_method(HttpMethod.POST)
