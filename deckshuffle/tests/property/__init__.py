"""
Property tests.

Hypothesis-based checks of the deck invariants: card conservation across draws
and shuffles, and monotonic shrinking.
"""
