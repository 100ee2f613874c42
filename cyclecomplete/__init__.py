"""cyclecomplete — cycle the word under the cursor through fuzzy matches."""

__version__ = "0.1.0"
