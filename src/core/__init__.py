"""
Core domain models and mathematical primitives.

This module contains the foundational building blocks for planar angles:
canonicalization math and the immutable Angle value type.
"""
