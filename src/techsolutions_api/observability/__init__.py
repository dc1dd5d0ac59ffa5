"""
techsolutions_api.observability

Structured logging setup and request-scoped log context.
"""
