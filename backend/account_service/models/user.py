# account_service/models/user.py
"""
Database model for users.
Represents a user account in the system, containing login credentials
and profile information.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Backs the Tortoise user store. Handlers never see this class directly;
    the store converts rows to UserRecord instances.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all users (enforced by a unique index, so
      two concurrent registrations cannot both succeed)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(max_length=256)  # Display name (not unique)
    email = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login email (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never plain text
    created_at = fields.DatetimeField(auto_now_add=True)  # Set once on creation
    updated_at = fields.DatetimeField(auto_now=True)  # Refreshed on every save

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
