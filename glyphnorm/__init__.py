"""Unicode script detection and per-script word normalizers."""

__version__ = "0.1.0"