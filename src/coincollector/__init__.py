"""CoinCollector - euro coin collection management backend.

Users own groups, groups own collections and collections own coins. The
storage services persist this hierarchy transactionally.
"""

__version__ = "0.1.0"
