"""Classic competitive-programming algorithms: linear algebra, graphs and strings."""

__version__ = "0.1.0"