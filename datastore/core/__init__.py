"""
Core utilities shared across the datastore package.

This package hosts configuration helpers (env vars, paths, backend selection),
the error hierarchy raised by every engine, and logging setup. Engines and
routers depend on these primitives instead of reading os.environ directly.
"""
