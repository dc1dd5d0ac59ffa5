"""
techsolutions_api.api

HTTP layer: app factory, routers, schemas and exception handlers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: parse input, call a service, wrap the result in an envelope.
