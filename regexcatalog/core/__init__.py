"""regexcatalog core components.

This package contains the immutable catalog type, the pattern definition
tables, and the process-wide registry that serves lookups from them.
"""
