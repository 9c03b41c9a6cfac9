"""Users feature: user records and cursor-paginated search."""

from user_directory.features.users.repository import load_users
from user_directory.features.users.schemas import UserResponse
from user_directory.features.users.service import search_users

__all__ = ["UserResponse", "load_users", "search_users"]
