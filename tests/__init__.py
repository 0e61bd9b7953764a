"""ADDRESSBOOK test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The installed CLI driven through Click's CliRunner.
- fixtures/     : Shared fixtures and hypothesis strategies (loaded as pytest plugins).
- helpers/      : Shared assertion utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O).
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
