"""Built-in catalogs, one module per resource kind.

Each module exposes ``RECORDS``: a list of plain payload records. Modules are
imported lazily by the built-in loader.
"""
