"""Unit tests for document loading."""

import io
import json
from unittest.mock import Mock, patch

import pytest
import requests

from oas_codegen.utils import (
    DocumentLoaderError,
    load_json,
    load_json_from_file,
    load_json_from_stdin,
    load_json_from_url,
)


class TestLoadJsonFromFile:
    """Test load_json_from_file function."""

    def test_load(self, petstore_file, petstore_document):
        source, data = load_json_from_file(petstore_file)
        assert source == str(petstore_file)
        assert data == petstore_document

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentLoaderError, match="File not found"):
            load_json_from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(DocumentLoaderError, match="Invalid JSON"):
            load_json_from_file(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')
        with pytest.raises(DocumentLoaderError, match="not valid UTF-8"):
            load_json_from_file(path)


class TestLoadJsonFromUrl:
    """Test load_json_from_url function with a mocked HTTP layer."""

    def test_load(self, petstore_document):
        response = Mock()
        response.headers = {"content-type": "application/json"}
        response.json.return_value = petstore_document

        with patch("oas_codegen.utils.requests.get", return_value=response) as mock_get:
            source, data = load_json_from_url("https://mock/openapi.json", timeout=5)

        mock_get.assert_called_once_with("https://mock/openapi.json", timeout=5)
        response.raise_for_status.assert_called_once()
        assert source == "https://mock/openapi.json"
        assert data == petstore_document

    def test_invalid_url(self):
        with pytest.raises(DocumentLoaderError, match="Invalid URL"):
            load_json_from_url("not-a-url")

    def test_timeout(self):
        with patch(
            "oas_codegen.utils.requests.get", side_effect=requests.exceptions.Timeout()
        ):
            with pytest.raises(DocumentLoaderError, match="timeout"):
                load_json_from_url("https://mock/openapi.json")

    def test_http_error(self):
        response = Mock()
        response.status_code = 404
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            response=response
        )
        with patch("oas_codegen.utils.requests.get", return_value=response):
            with pytest.raises(DocumentLoaderError, match="HTTP error 404"):
                load_json_from_url("https://mock/openapi.json")

    def test_invalid_json_body(self):
        response = Mock()
        response.headers = {"content-type": "application/json"}
        response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
        with patch("oas_codegen.utils.requests.get", return_value=response):
            with pytest.raises(DocumentLoaderError, match="Invalid JSON response"):
                load_json_from_url("https://mock/openapi.json")


class TestLoadJsonFromStdin:
    """Test load_json_from_stdin function."""

    def test_load(self):
        source, data = load_json_from_stdin(io.StringIO('{"openapi": "3.0.0"}'))
        assert source == "<stdin>"
        assert data == {"openapi": "3.0.0"}

    def test_invalid_json(self):
        with pytest.raises(DocumentLoaderError):
            load_json_from_stdin(io.StringIO("nope"))

    def test_not_utf8(self):
        stream = io.TextIOWrapper(io.BytesIO(b'{"a": "\xff"}'), encoding="utf-8")
        with pytest.raises(DocumentLoaderError, match="not valid UTF-8"):
            load_json_from_stdin(stream)


class TestLoadJson:
    """Test load_json dispatch."""

    def test_requires_a_source(self):
        with pytest.raises(DocumentLoaderError, match="must be provided"):
            load_json()

    def test_rejects_two_sources(self, petstore_file):
        with pytest.raises(DocumentLoaderError, match="Cannot specify both"):
            load_json(file_path=petstore_file, url="https://mock/openapi.json")

    def test_file(self, petstore_file, petstore_document):
        assert load_json(file_path=petstore_file)[1] == petstore_document
