"""Diagnostics package.

Light-weight self checks runnable from the CLI (`ajdcal diag <tool>`).
"""

__all__ = ["round_trip"]
