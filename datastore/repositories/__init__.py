"""
Persistence adapters.

These modules encapsulate how resources are stored/retrieved (a JSON file or
a SQL database). Engines depend on them rather than touching files or
sessions directly.
"""
