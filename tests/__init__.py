"""Bookstore test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The ``bookstore`` CLI driven through Click's CliRunner.
- fixtures/     : Shared pytest fixtures and record factories (no tests here).

General guidance
- Keep unit fast and deterministic; inject plain collections or mocks as the
  services' backing stores.
- e2e asserts user-observable output and exit codes, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
