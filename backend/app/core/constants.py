"""Shared constants and enums used across the application."""

from enum import StrEnum

# Fixed listener address; intentionally not read from the environment
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000


class Message(StrEnum):
    """Static response messages returned by the HTTP handlers."""

    USER_NOT_FOUND = "User not found"
    GROUP_NOT_FOUND = "Group not found"
    TASK_NOT_FOUND = "Task not found"
    USER_OR_GROUP_NOT_FOUND = "User or Group not found"

    USER_UPDATED = "Successfully updated user"
    USER_DELETED = "User deleted successfully"
    GROUP_UPDATED = "Successfully updated group"
    GROUP_DELETED = "Group deleted successfully"
    TASK_DELETED = "Task deleted successfully"
    TASK_ASSIGNED = "Successfully updated task on associated user"
    USER_ADDED_TO_GROUP = "User added to group successfully"

    INVALID_REQUEST = "Invalid request"
