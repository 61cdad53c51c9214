"""Entrypoints (inbound adapters) for toolshed.

Expose the library to the outside world. Parse and validate inputs, call the
library functions, and present results.
"""
