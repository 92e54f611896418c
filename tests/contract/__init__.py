"""Contract tests.

Behavior defined once and run against every implementation of an interface
(currently the HTTP response sinks) so adapters stay interchangeable.
"""
