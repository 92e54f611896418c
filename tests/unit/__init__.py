"""Unit tests, one module per helper module.

Keep them fast and deterministic: inject clocks, random generators and
environment values instead of depending on the machine running them.
"""
