import json

import httpx
import pytest
from fastapi.testclient import TestClient

from leakchecker.helpers.hibp import HIBPClient
from leakchecker.main import app
from leakchecker.proxy import get_hibp_client

HIBP_TEST_URL = "https://hibp.test/api/v3"

DEEZER = {
    "Name": "Deezer",
    "Title": "Deezer",
    "Domain": "deezer.com",
    "BreachDate": "2019-04-22",
    "AddedDate": "2022-11-08T11:20:55Z",
    "ModifiedDate": "2022-11-08T11:20:55Z",
    "PwnCount": 229037936,
    "Description": 'In late 2022, <a href="https://example.com/deezer">Deezer</a> data appeared online.',
    "LogoPath": "/Content/Images/PwnedLogos/Deezer.png",
    "DataClasses": ["Dates of birth", "Email addresses", "Genders"],
    "IsVerified": True,
    "IsFabricated": False,
    "IsSensitive": False,
    "IsRetired": False,
    "IsSpamList": False,
}

CANVA = {
    "Name": "Canva",
    "Title": "Canva",
    "Domain": "canva.com",
    "BreachDate": "2019-05-24",
    "PwnCount": 137272116,
    "Description": "In May 2019, Canva suffered a data breach.",
    "LogoPath": "",
    "DataClasses": [],
    "IsVerified": False,
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeHIBP:
    """Records requests made to the provider and replies with a canned response."""

    def __init__(self):
        self.requests = []
        self.status = 404
        self.body = None
        self.error = None

    def reply(self, status, body=None):
        self.status = status
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is None:
            return httpx.Response(self.status)
        if isinstance(self.body, str):
            return httpx.Response(self.status, text=self.body)
        return httpx.Response(self.status, content=json.dumps(self.body).encode(),
                              headers={"Content-Type": "application/json"})

    def client(self) -> HIBPClient:
        return HIBPClient(base_url=HIBP_TEST_URL, api_key="", transport=httpx.MockTransport(self.handler))


@pytest.fixture
def hibp():
    fake = FakeHIBP()
    app.dependency_overrides[get_hibp_client] = fake.client
    yield fake
    app.dependency_overrides.pop(get_hibp_client, None)


@pytest.fixture
def client(hibp):
    with TestClient(app) as c:
        yield c
