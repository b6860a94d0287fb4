"""Unit tests for section helpers."""

from unittest.mock import MagicMock

import pytest

from canvas_api_client import sections


@pytest.mark.parametrize(
    "func,verb,target,path",
    [
        (sections.create_section, "post", "sis_course_id:ART063|FIT|S2-16", "courses/sis_course_id:ART063|FIT|S2-16/sections"),
        (sections.get_section, "get", 4260, "sections/4260"),
        (sections.edit_section, "put", 4260, "sections/4260"),
        (sections.delete_section, "delete", "sis_section_id:ART063-05-S2-16", "sections/sis_section_id:ART063-05-S2-16"),
        (sections.sections_by_course, "get", 12, "courses/12/sections"),
    ],
)
def test_section_paths(func, verb, target, path):
    client = MagicMock()
    params = {"course_section": {"name": "Section A"}}

    result = func(client, target, params)

    getattr(client, verb).assert_called_once_with(path, params)
    assert result is getattr(client, verb).return_value
