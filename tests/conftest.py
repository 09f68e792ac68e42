import pytest

from subharvest.phases import passive
from subharvest.sources import SourceDescriptor, STRUCTURED, UNSTRUCTURED

JSON_SOURCE = SourceDescriptor('jsonsrc', 'https://json.test/api?q={domain}', STRUCTURED)
TEXT_SOURCE = SourceDescriptor('textsrc', 'https://text.test/hosts/{domain}', UNSTRUCTURED)
TEST_SOURCES = (JSON_SOURCE, TEXT_SOURCE)


class FakeResponse:
    def __init__(self, body=b'', status_code=200, read_error=None):
        self._body = body
        self.status_code = status_code
        self.read_error = read_error
        self.closed = False

    @property
    def content(self):
        if self.read_error is not None:
            raise self.read_error
        return self._body

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self, responder):
        self.responder = responder
        self.requested = []
        self.closed = False

    def get(self, url, timeout=None, stream=False):
        self.requested.append(url)
        outcome = self.responder(url)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


def respond_with(table):
    """Responder serving `table[url]`, or an empty 404 for unknown URLs."""
    def responder(url):
        return table.get(url, FakeResponse(b'', status_code=404))
    return responder


@pytest.fixture
def fake_http(monkeypatch):
    sessions = []

    def install(responder):
        def factory(enumerator):
            session = FakeSession(responder)
            sessions.append(session)
            return session
        monkeypatch.setattr(passive, 'get_session_with_proxy', factory)
        return sessions

    return install
