import json
import pytest
import requests

from poem_printer.api_client import GanjoorAPI, resolve_poet_id, poet_name_from_record
from poem_printer.config import API_BASE, UNKNOWN_POET
from poem_printer.errors import HttpError, NetworkError, ParseError


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    def __init__(self, responses):
        self.responses = dict(responses)
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        result = self.responses[url]
        if isinstance(result, Exception):
            raise result
        return result


def _api(responses):
    session = FakeSession(responses)
    return GanjoorAPI(session=session, timeout=5), session

def test_fetch_poem_by_path_encodes_path():
    url = f"{API_BASE}/poem?url=%2Fhafez%2Fghazal%2Fsh1"
    api, session = _api({url: FakeResponse(payload={"id": 2130, "title": "غزل شمارهٔ ۱"})})
    poem = api.fetch_poem_by_path("/hafez/ghazal/sh1")
    assert poem["id"] == 2130
    assert len(session.calls) == 1
    called_url, headers, timeout = session.calls[0]
    assert called_url == url
    assert "User-Agent" in headers
    assert timeout == 5

def test_fetch_verses():
    url = f"{API_BASE}/poem/2130/verses"
    api, _ = _api({url: FakeResponse(payload=[{"text": "a"}, {"text": "b"}])})
    assert api.fetch_verses(2130) == [{"text": "a"}, {"text": "b"}]

def test_fetch_verses_not_a_list():
    url = f"{API_BASE}/poem/1/verses"
    api, _ = _api({url: FakeResponse(payload={"verses": []})})
    with pytest.raises(ParseError):
        api.fetch_verses(1)

def test_fetch_verses_with_non_record_entry():
    url = f"{API_BASE}/poem/1/verses"
    api, _ = _api({url: FakeResponse(payload=[{"text": "سلام"}, None])})
    with pytest.raises(ParseError):
        api.fetch_verses(1)

def test_random_and_poet_endpoints():
    api, session = _api({
        f"{API_BASE}/poem/random": FakeResponse(payload={"id": 7}),
        f"{API_BASE}/poet/2": FakeResponse(payload={"poet": {"name": "حافظ"}}),
    })
    assert api.fetch_random_poem() == {"id": 7}
    assert api.fetch_poet(2) == {"poet": {"name": "حافظ"}}
    assert [c[0] for c in session.calls] == [f"{API_BASE}/poem/random", f"{API_BASE}/poet/2"]

def test_http_error_carries_status_and_is_not_retried():
    url = f"{API_BASE}/poem/random"
    api, session = _api({url: FakeResponse(status_code=404, payload={})})
    with pytest.raises(HttpError) as exc:
        api.fetch_random_poem()
    assert exc.value.status == 404
    assert "404" in str(exc.value)
    assert len(session.calls) == 1

def test_invalid_json_is_parse_error():
    url = f"{API_BASE}/poem/random"
    api, _ = _api({url: FakeResponse(text="<html>not json</html>")})
    with pytest.raises(ParseError):
        api.fetch_random_poem()

def test_transport_failure_is_network_error():
    url = f"{API_BASE}/poem/random"
    api, _ = _api({url: requests.ConnectionError("boom")})
    with pytest.raises(NetworkError):
        api.fetch_random_poem()

def test_fetch_html_returns_text():
    api, _ = _api({"https://example.com/p": FakeResponse(text="<html></html>")})
    assert api.fetch_html("https://example.com/p") == "<html></html>"

def test_resolve_poet_id():
    assert resolve_poet_id({"category": {"poet": {"id": 2}}}) == 2
    assert resolve_poet_id({"sections": [{"poetId": 5}]}) == 5
    assert resolve_poet_id({"category": {"poet": {}}, "sections": [{"poetId": 5}]}) == 5
    assert resolve_poet_id({"sections": []}) is None
    assert resolve_poet_id({}) is None

@pytest.mark.parametrize("record, expected", [
    ({"poet": {"name": "حافظ", "nickname": "لسان الغیب"}}, "حافظ"),
    ({"poet": {"nickname": "لسان الغیب"}}, "لسان الغیب"),
    ({"poet": {"name": ""}, "name": "سعدی"}, "سعدی"),
    ({"nickname": "مولانا"}, "مولانا"),
    ({}, UNKNOWN_POET),
])
def test_poet_name_from_record(record, expected):
    assert poet_name_from_record(record) == expected
