"""HTTP response sink adapters."""
