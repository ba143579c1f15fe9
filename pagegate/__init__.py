"""Content-sufficiency scoring and indexability gating for local-business sites."""

__version__ = "0.1.0"
