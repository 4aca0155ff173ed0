"""
Test suite for limitlab

Contains:
- tests/unit/          : Unit tests for individual modules
"""
