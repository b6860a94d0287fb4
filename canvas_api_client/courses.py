"""Helpers for Canvas' Courses API.

See https://canvas.instructure.com/doc/api/courses.html
"""

from .client import CanvasClient


def create_course(client: CanvasClient, account_id, params=None):
    """Create a course under an account.

    Example:
        create_course(client, 1, {"course": {"name": "New Test Course", "course_code": "NTC123"}})
    """
    return client.post(f"accounts/{account_id}/courses", params)


def get_course(client: CanvasClient, course_id, params=None):
    return client.get(f"courses/{course_id}", params)


def edit_course(client: CanvasClient, course_id, params=None):
    return client.put(f"courses/{course_id}", params)


def delete_course(client: CanvasClient, course_id, params=None):
    """Delete or conclude a course.

    ``event`` defaults to ``conclude``; pass ``{"event": "delete"}`` to remove
    the course outright.
    """
    params = dict(params or {})
    if not params.get("event"):
        params["event"] = "conclude"
    return client.delete(f"courses/{course_id}", params)


def courses_by_user(client: CanvasClient, user_id, params=None):
    return client.get(f"users/{user_id}/courses", params)


def users_by_course(client: CanvasClient, course_id, params=None):
    """List users in a course, e.g. ``{"enrollment_type": ["student"]}``."""
    return client.get(f"courses/{course_id}/users", params)
