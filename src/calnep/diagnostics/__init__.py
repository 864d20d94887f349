"""Diagnostics package.

Light-weight checks and printouts over the BS calendar table. year_lengths
needs the plotting extras: pip install "calnep[diagnostics]"
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "table_audit", "year_lengths"]
