import json

import pytest
import requests

from students_api.client import StudentsAPI


class FakeSession:
    """Records requests and replays canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_response(status_code, payload=None, url="http://testserver"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    return response


@pytest.fixture
def make_api():
    def _make(*responses):
        session = FakeSession(*responses)
        return StudentsAPI(base_url="http://testserver/", session=session, timeout=3), session

    return _make


def test_create_student(make_api):
    api, session = make_api(make_response(201, {"id": 7}))

    student_id, error = api.create_student("Jane", "jane@example.com", 21)

    assert (student_id, error) == (7, None)
    assert session.calls == [
        {
            "method": "POST",
            "url": "http://testserver/api/students",
            "json": {"name": "Jane", "email": "jane@example.com", "age": 21},
            "timeout": 3,
        }
    ]


def test_get_student_reports_server_error_message(make_api):
    api, _ = make_api(make_response(500, {"status": "Error", "error": "no student found with id 3"}))

    student, error = api.get_student(3)

    assert student is None
    assert error == {"status_code": 500, "message": "no student found with id 3"}


def test_list_students(make_api):
    rows = [{"id": 1, "name": "A", "email": "a@example.com", "age": 20}]
    api, session = make_api(make_response(200, rows))

    assert api.list_students() == (rows, None)
    assert session.calls[0]["url"] == "http://testserver/api/students"


def test_update_student_validation_error(make_api):
    api, session = make_api(make_response(400, {"status": "Error", "error": "field name is invalid"}))

    ok, error = api.update_student(1, "", "a@example.com", 20)

    assert ok is False
    assert error == {"status_code": 400, "message": "field name is invalid"}
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://testserver/api/students/1"


def test_delete_student(make_api):
    api, session = make_api(make_response(200, {"message": "student deleted successfully"}))

    assert api.delete_student(4) == (True, None)
    assert session.calls[0]["method"] == "DELETE"


def test_connection_error(make_api):
    api, _ = make_api(requests.ConnectionError("connection refused"))

    ok, error = api.health()

    assert ok is False
    assert error == {"status_code": None, "message": "connection refused"}


def test_health(make_api):
    api, session = make_api(make_response(200, {"status": "healthy"}))

    assert api.health() == (True, None)
    assert session.calls[0]["url"] == "http://testserver/health"
