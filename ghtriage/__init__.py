"""ghtriage: classify GitHub notifications by how directly they concern you."""

__version__ = "0.1.0"
