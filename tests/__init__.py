"""Test suite for gdtfkit.

Test Structure:
- unit/: Unit tests for individual components
  - units/: Value codecs (DMX values, nodes, colors, enums)
  - parsers/: XML cursor and the declarative decode contract
  - models/: Entity decoding per document section
  - config/, io/, cli/, utils/: Ambient layers
- integration/: Whole-document decoding through GdtfParser
- fixtures/: Sample description documents
- conftest.py: Shared fixtures and test configuration
- equivalence.py: Order-insensitive comparison of decoded entity trees
"""
