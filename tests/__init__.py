"""
Test Suite

Contains unit tests for nanji.

Structure:
- tests/unit/: Tests for individual components (parser, converter, aliases,
  config, renderer) and for the CLI as a whole

Uses pytest. tests/conftest.py isolates every test from the real user config
and environment.
"""
