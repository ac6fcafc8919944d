"""Test suite for hotascurve.

Test Structure:
- unit/curves/: Curve model, evaluation, editing and publishing tests
- unit/runtime/: Axis channel and poller tests
- unit/config/: Config loader tests
- unit/utils/: Logging and math utility tests
- unit/cli/: Command-line interface tests
- conftest.py: Shared fixtures and test configuration
"""
