"""Helpers for Canvas' Sections API.

See https://canvas.instructure.com/doc/api/sections.html
"""

from .client import CanvasClient


def create_section(client: CanvasClient, course_id, params=None):
    return client.post(f"courses/{course_id}/sections", params)


def get_section(client: CanvasClient, section_id, params=None):
    return client.get(f"sections/{section_id}", params)


def edit_section(client: CanvasClient, section_id, params=None):
    return client.put(f"sections/{section_id}", params)


def delete_section(client: CanvasClient, section_id, params=None):
    return client.delete(f"sections/{section_id}", params)


def sections_by_course(client: CanvasClient, course_id, params=None):
    return client.get(f"courses/{course_id}/sections", params)
