"""Weekly class schedule grid for a single institution (GMT+7)."""

__version__ = "0.1.0"
