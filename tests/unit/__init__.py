"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - models/ and config: Pydantic validation and serialization
    - parsing/: Container parsing and slide trees
    - postprocessing/: Cleanup stages and stage ordering
    - extractors/: Table detection and metadata inference
    - prompts: Prompt building and response parsing

Follows single responsibility per test function. Leverages pytest-check for
multiple assertions per test.
"""
