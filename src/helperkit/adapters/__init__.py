"""Concrete implementations of the helperkit interfaces."""
