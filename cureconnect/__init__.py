"""CureConnect backend: accounts, session log and disease reference data."""

__version__ = "0.1.0"
