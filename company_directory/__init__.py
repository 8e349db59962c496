"""Companies Directory — browse, filter and paginate a remote company list."""

__version__ = "1.0.0"
