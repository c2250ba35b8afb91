"""
slsroute test suite
===================

Test Modules
------------
- test_naming.py: Route name variants
- test_patcher.py: Marker insertion and block builders
- test_models.py: Pydantic models and slsattributes.json loading
- test_generator.py: Template rendering and the scaffolding pipeline
- test_cli.py: Command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_patcher.py

    # Run specific test class
    pytest tests/test_patcher.py::TestInsertBeforeMarker
"""
