"""Function-level security policies: core settings, an enforcer and a simple sandbox decorator."""

__version__ = "0.1.0"
__all__ = ["core", "enforcer", "simple"]