"""
techsolutions_api.services

Service-layer use cases.

Responsibilities:
- Own transactions (commit/rollback) around repository calls.
- Classify failures into the `techsolutions_api.errors` taxonomy.
"""

# Package marker.
