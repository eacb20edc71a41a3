"""
Bourbon catalog package.

Responsibilities:
- Read the static bourbon CSV into a raw source table.
- Coerce flavor intensities and derive per-bourbon flavor tags.
- Normalize distillery metadata (address, website, amenities).
- Expose the result as an immutable in-memory Catalog.
"""
