"""
toyc Command-Line Interface
===========================

- **toyc**: translate a toy source file to pseudo-assembly

Implemented as a Click-based CLI application.
"""

__all__ = ["toyc"]
