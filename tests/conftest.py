import sys
from pathlib import Path

import pytest
import requests

# Ensure root path is available for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200, data=None) -> None:
        self.text = text
        self.status_code = status_code
        self._data = data

    def json(self):
        if self._data is None:
            raise ValueError("No JSON object could be decoded")
        return self._data

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def fake_get(mocker):
    """Patch requests.get with a url -> response/exception routing table.

    Unknown URLs answer 404.
    """

    def _install(routes: dict):
        def _get(url, **kwargs):
            value = routes.get(url)
            if isinstance(value, Exception):
                raise value
            if value is None:
                return FakeResponse(status_code=404)
            return value

        return mocker.patch("requests.get", side_effect=_get)

    return _install
