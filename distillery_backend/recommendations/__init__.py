"""
Distillery recommendation engine.

Responsibilities:
- Accept the ids of bourbons a user has already picked.
- Score every distillery in the catalog against that selection, either by
  flavor-tag overlap or by flavor-profile similarity.
- Return ranked distillery recommendations ready for API serialisation.
"""
