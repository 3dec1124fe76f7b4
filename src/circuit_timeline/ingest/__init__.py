"""Circuit ingestion.

Fetches existing and proposed circuits per location from the circuits API,
validates them into `Circuit` models, and joins the per-location results.
"""
