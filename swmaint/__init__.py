"""swmaint — keep hand-built software checkouts updated, built and installed."""

__version__ = "0.1.0"
