"""
deckshuffle tests.

Test Categories:
    unit/: single-module behaviour
    property/: hypothesis-based invariants
    integration/: deck, strategies and configuration together
"""
