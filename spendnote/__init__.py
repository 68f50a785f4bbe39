"""
spendnote: local-first free-text transaction parser for English and
Vietnamese bookkeeping entries.
"""

__version__ = "0.1.0"
