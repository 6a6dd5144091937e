"""Value types for revenue distribution accounting: epochs, unit shares, leaf records and bit flags."""

__version__ = "0.1.0"

__all__ = ["__version__"]