"""circuit_timeline package.

Projects monthly circuit costs for a proposal over a 36-month horizon,
broken out by circuit type and by existing vs. proposed circuits.

Architecture:
- Ingest: fetch circuits per location from the circuits API and validate them
- Timeline: month sequence, activity predicate and per-month aggregation
- Pydantic models validate circuits at ingestion time
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
