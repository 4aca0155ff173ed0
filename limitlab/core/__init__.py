"""
Core domain models, numerical primitives, and serialization contracts.

This module contains the foundational building blocks of limit evaluation
that are independent of presentation and of the example-function registry.
"""
