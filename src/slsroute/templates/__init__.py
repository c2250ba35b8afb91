"""
slsroute.templates - Jinja2 Route Templates
===========================================

One sub-directory per ``slsroute.models.Language``. Every language ships the
same four templates, rendered into ``<slug>/`` of the target project:

    - main.go.j2: Lambda handler
    - main_test.go.j2: Handler unit test
    - event.json.j2: API Gateway event fixture used by the test
    - Makefile.j2: Per-route build file

Template Context
----------------
    route : RouteDescriptor
        Name variants and HTTP method of the route being generated.

    config : ScaffoldConfig
        Language and project directory of the run.

    slsroute_version : str
        Version of slsroute for attribution.

Templates are loaded by ``slsroute.generator.create_jinja_env`` through
Jinja2's PackageLoader.
"""
