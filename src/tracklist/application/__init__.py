"""Application layer orchestrating playlist use cases for user interfaces."""
