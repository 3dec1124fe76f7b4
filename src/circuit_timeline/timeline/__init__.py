"""Monthly cost projection.

This package turns existing and proposed circuits into a fixed-length series
of per-month totals: `months` builds the month sequence, `activity` decides
whether a circuit is billed in a month, and `aggregate` accumulates costs.
"""
