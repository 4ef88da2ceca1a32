"""Test package for lecture_ingest.

Provides test coverage for all components with unit tests for isolated
logic and integration tests for byte-level extraction workflows.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end extraction tests
    - builders.py: In-memory PPTX and PDF builders

Uses generated documents instead of binary fixtures. No mocks.
Leverages pytest with pytest-check for soft assertions.
"""
