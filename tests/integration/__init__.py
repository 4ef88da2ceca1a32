"""Integration tests for components working together as a system.

No mocks for core functionality - tests real interactions.

Coverage:
    - PDF extraction from generated documents
    - PPTX extraction from generated presentations
    - Document routing by file type and storage key

Slower than unit tests but provides higher confidence.
"""
