"""
API layer for the User Backend.

Exposes the HTTP endpoints of the user resource under /api/users.
"""
