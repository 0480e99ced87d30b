"""Static landing page builder for exported codelabs."""

__version__ = "0.1.0"
