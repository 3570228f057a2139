"""UTILKIT

A small collection of independent, stateless helpers: currency formatting,
random identifiers, text truncation, email-shape validation, elapsed-time
humanization, shuffling, slugs, grouping, and a timeout-guarded HTTP fetch.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
