"""HELPERKIT

Stateless helpers for application-layer chores: record validation and
ordering, path and date formatting, sanitization, URL and header helpers,
fixed-point conversion and xxHash digests.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
