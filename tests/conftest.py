import pytest

from filfox_verifier.models import SourceFile


def make_files(contents):
    """Build a path -> SourceFile map from {path: content}"""
    return {path: SourceFile(path, content) for path, content in contents.items()}


class FakeResponse:
    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeSession:
    """Stands in for requests.Session and records every POST"""

    def __init__(self, body=None, error=None):
        self.body = body if body is not None else {"errorCode": 0, "contractName": "Token"}
        self.error = error
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def contract_address():
    return "0x52347653a24a9a1e432aec6cd91a271158205963"
