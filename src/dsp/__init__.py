"""
Discrete sequences: offset-indexed sample storage and sequence arithmetic.

This package is independent of external systems; the only boundaries are
the textual token form and the JSON document contract.
"""
