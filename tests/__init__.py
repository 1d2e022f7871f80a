"""DRILLS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The `drills` command driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic (no real I/O or wall-clock time); inject a
  FixedClock and autospecced fakes at the interface boundaries.
- e2e asserts user-observable output and exit codes, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property, e2e
"""
