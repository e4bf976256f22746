"""tfctl: token-factory command validator and dispatcher."""

__version__ = "0.1.0"
