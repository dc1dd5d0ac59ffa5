"""
techsolutions_api.db.repositories

Thin data-access classes, one per table. Transactions are committed by the
service layer, never here.
"""

# Package marker; repositories are imported directly from submodules.
