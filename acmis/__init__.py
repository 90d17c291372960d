"""Account management: a cash account, a stock portfolio priced from two quote tables, and integer sets."""

__version__ = "1.0.0"