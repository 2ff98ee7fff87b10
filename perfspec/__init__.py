# perfspec/__init__.py
"""perfspec: perf event specifier parsing and event listing."""

__version__ = "0.1.0"
