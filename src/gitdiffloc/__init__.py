"""git-diff-loc — count code and comment line changes between two git revisions."""

__version__ = "0.1.0"
