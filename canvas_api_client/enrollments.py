"""Helpers for Canvas' Enrollments API.

See https://canvas.instructure.com/doc/api/enrollments.html
"""

from .client import CanvasClient

ENROLLMENT_TARGETS = ("course", "section")


def _target_path(target_id, type):
    if type not in ENROLLMENT_TARGETS:
        raise ValueError(f"Enrollment type must be one of {ENROLLMENT_TARGETS}, got {type!r}")
    return f"{type}s/{target_id}/enrollments"


def create_enrollment(client: CanvasClient, target_id, params=None, type="section"):
    """Enroll a user in a course or section.

    Example:
        create_enrollment(
            client,
            "sis_course_id:ART063|123|S2-16",
            {"enrollment": {"user_id": 3, "type": "StudentEnrollment"}},
            type="course",
        )
    """
    return client.post(_target_path(target_id, type), params)


def get_enrollments(client: CanvasClient, target_id, params=None, type="section"):
    return client.get(_target_path(target_id, type), params)


def delete_enrollment(client: CanvasClient, course_id, enrollment_id, params=None):
    """Delete or conclude an enrollment. ``task`` defaults to ``conclude``."""
    params = dict(params or {})
    if not params.get("task"):
        params["task"] = "conclude"
    return client.delete(f"courses/{course_id}/enrollments/{enrollment_id}", params)
