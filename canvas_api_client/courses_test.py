"""Unit tests for course helpers."""

from unittest.mock import MagicMock

from canvas_api_client import courses


def describe_courses():
    def _client():
        client = MagicMock()
        client.get.return_value = [{"id": 1}]
        client.post.return_value = {"id": 2}
        client.put.return_value = {"id": 3}
        client.delete.return_value = {"delete": True}
        return client

    def it_creates_under_an_account():
        client = _client()
        params = {"course": {"name": "New Test Course", "course_code": "NTC123"}}

        assert courses.create_course(client, 1, params) == {"id": 2}
        client.post.assert_called_once_with("accounts/1/courses", params)

    def it_gets_a_course():
        client = _client()
        courses.get_course(client, 4542)
        client.get.assert_called_once_with("courses/4542", None)

    def it_edits_a_course():
        client = _client()
        courses.edit_course(client, 4542, {"course": {"name": "Renamed"}})
        client.put.assert_called_once_with("courses/4542", {"course": {"name": "Renamed"}})

    def it_concludes_by_default_on_delete():
        client = _client()
        params = {}

        courses.delete_course(client, "sis_course_id:ART063|BOB|S2-16", params)

        client.delete.assert_called_once_with("courses/sis_course_id:ART063|BOB|S2-16", {"event": "conclude"})
        assert params == {}

    def it_passes_explicit_delete_event():
        client = _client()
        courses.delete_course(client, 7, {"event": "delete"})
        client.delete.assert_called_once_with("courses/7", {"event": "delete"})

    def it_lists_courses_of_a_user():
        client = _client()
        assert courses.courses_by_user(client, 630, {"include": ["term", "sections"]}) == [{"id": 1}]
        client.get.assert_called_once_with("users/630/courses", {"include": ["term", "sections"]})

    def it_lists_users_of_a_course():
        client = _client()
        courses.users_by_course(client, 3472)
        client.get.assert_called_once_with("courses/3472/users", None)
