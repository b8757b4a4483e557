"""gallery_timeline package.

Contains modules for listing dated photo files, parsing a year-month from each
filename, clustering the photos into timeline ranges, and delivering the
result as a static JSON artifact or over a small HTTP endpoint.

Architecture:
- Parse → Group by month → Merge neighbours → Finalize ranges
- pandas is used for the month bucketing
- Pydantic models validate records and groups and define the JSON wire shape
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
