import json
import urllib.error
from unittest.mock import patch

import pytest

from bookstore.catalog import client


BASE = "http://bookstore.test"


def _respond(mock_urlopen, payload):
    mock_urlopen.return_value.__enter__.return_value.read.return_value = json.dumps(payload).encode("utf-8")


@patch.object(client.urllib.request, "urlopen")
def test_fetch_all_books(mock_urlopen):
    _respond(mock_urlopen, {"1": {"title": "Things Fall Apart"}})
    assert client.fetch_all_books(BASE) == {"1": {"title": "Things Fall Apart"}}
    request = mock_urlopen.call_args[0][0]
    assert request.full_url == "http://bookstore.test/"


@patch.object(client.urllib.request, "urlopen")
def test_fetch_book_by_isbn(mock_urlopen):
    _respond(mock_urlopen, {"isbn": "1"})
    assert client.fetch_book_by_isbn(1, BASE) == {"isbn": "1"}
    assert mock_urlopen.call_args[0][0].full_url == "http://bookstore.test/isbn/1"


@patch.object(client.urllib.request, "urlopen")
def test_fetch_books_by_author_quotes_path(mock_urlopen):
    _respond(mock_urlopen, [])
    client.fetch_books_by_author("Chinua Achebe", BASE + "/")
    assert mock_urlopen.call_args[0][0].full_url == "http://bookstore.test/author/Chinua%20Achebe"


@patch.object(client.urllib.request, "urlopen")
def test_failure_is_logged_and_returns_none(mock_urlopen, caplog):
    mock_urlopen.side_effect = urllib.error.URLError("connection refused")
    assert client.fetch_book_by_title("Things Fall Apart", BASE) is None
    assert "Error fetching" in caplog.text


@patch.object(client.urllib.request, "urlopen")
def test_title_can_reraise(mock_urlopen):
    mock_urlopen.side_effect = urllib.error.URLError("connection refused")
    with pytest.raises(urllib.error.URLError):
        client.fetch_book_by_title("Things Fall Apart", BASE, raise_errors=True)


@patch.object(client.urllib.request, "urlopen")
def test_default_base_url_from_settings(mock_urlopen, monkeypatch):
    _respond(mock_urlopen, {})
    monkeypatch.setattr(client.settings, "BASE_URL", "http://configured:5000")
    client.fetch_all_books()
    assert mock_urlopen.call_args[0][0].full_url == "http://configured:5000/"
