"""formrules — declarative field validation for form submissions."""

__version__ = "1.0.0"
