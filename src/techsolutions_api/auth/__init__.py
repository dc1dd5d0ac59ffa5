"""
techsolutions_api.auth

Authentication package.

Responsibilities:
- Password hashing/verification (bcrypt).
- JWT issuing and validation.
- FastAPI dependency that turns a bearer token into a `Principal`.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here touches the database; user lookup lives in `services.auth_service`.
