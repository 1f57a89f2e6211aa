"""
Core math primitives, domain models, and JSON contracts.

This module contains the foundational building blocks that are independent
of the evaluator and any user interface.
"""
