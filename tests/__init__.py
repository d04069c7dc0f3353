"""
Test suite for the discrete sequence library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
