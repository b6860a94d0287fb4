"""Helpers for Canvas' Users API.

See https://canvas.instructure.com/doc/api/users.html

Canvas has no endpoint for deleting a user, so there is no delete helper.
"""

from .client import CanvasClient


def create_user(client: CanvasClient, account_id, params=None):
    """Create a user under an account.

    Example:
        create_user(client, 1, {
            "user": {"name": "John Doe"},
            "pseudonym": {"unique_id": "jdoe", "sis_user_id": "DOE123"},
        })
    """
    return client.post(f"accounts/{account_id}/users", params)


def get_user(client: CanvasClient, user_id, params=None):
    return client.get(f"users/{user_id}", params)


def edit_user(client: CanvasClient, user_id, params=None):
    return client.put(f"users/{user_id}", params)


def list_users(client: CanvasClient, account_id, params=None):
    """List users in an account, optionally filtered by ``search_term``."""
    return client.get(f"accounts/{account_id}/users", params)
