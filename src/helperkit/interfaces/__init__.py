"""Interfaces for the external collaborators the helpers talk to."""
