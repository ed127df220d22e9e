"""
Generators — produce resource files from the bucket table.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile`` instance. Writing to disk is left to the caller.
"""
