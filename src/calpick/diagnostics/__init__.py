"""Diagnostics package.

- pretty_grid: text rendering of a RenderModel (read-only consumer of the model)
- range_compat: legacy clause-by-clause range test vs. the total-order comparison
"""

__all__ = ["pretty_grid", "range_compat"]
