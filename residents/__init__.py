"""Active Residents topic service: issue-topic search and report routing."""

__version__ = "0.1.0"
