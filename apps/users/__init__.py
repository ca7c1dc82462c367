"""Users app package.

This module initializes the users app and exposes common patterns for
user management. It defines a custom user model with roles and
supports agency affiliation for realtors and administrators. Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout
the project.
"""
