"""Tokenized broker documents (pages of trimmed lines) used by the tests."""
