"""Core shared runtime helpers.

Import concrete helpers from submodules (for example ``core.output``) instead of
re-exporting from this package root.
"""

__all__: list[str] = []
