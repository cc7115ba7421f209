"""
prompt-optimizer - analyze requests before answering them.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
