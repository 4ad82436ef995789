"""Domain layer — widths, errors, and the digit conversions.

This layer depends only on stdlib.
It must never import from services or config.
"""
