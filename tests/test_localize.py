"""Tests for URL localization and query encryption."""

import json
from unittest.mock import Mock
from urllib.parse import parse_qs, urlsplit

import pytest

from companion.youtube.encryption import decrypt_query, encrypt_query
from companion.youtube.localize import UrlLocalizer

MEDIA_URL = (
    "https://rr1---sn-abc.googlevideo.com/videoplayback"
    "?expire=1700000000&itag=18&ip=203.0.113.7&pot=secret-token&mime=video%2Fmp4"
)


@pytest.fixture
def encryption_config():
    """Config stand-in with query encryption enabled."""
    return Mock(
        BASE_PATH="/companion",
        ENCRYPT_QUERY_PARAMS=True,
        ENCRYPTION_SECRET="test-encryption-secret",
        SENSITIVE_QUERY_PARAMS=frozenset({"pot", "ip"}),
    )


def _query(url: str) -> dict:
    return parse_qs(urlsplit(url).query, keep_blank_values=True)


class TestUrlLocalizerPlain:
    """Tests for localization without encryption."""

    def test_moves_host_into_query(self):
        """Test that the host becomes a query parameter under the base path."""
        localizer = UrlLocalizer(base_path="/companion")
        result = localizer.localize(MEDIA_URL)

        assert result.startswith("/companion/videoplayback?")
        query = _query(result)
        assert query["host"] == ["rr1---sn-abc.googlevideo.com"]
        assert query["itag"] == ["18"]
        assert query["mime"] == ["video/mp4"]
        assert "enc" not in query
        assert "data" not in query

    def test_keeps_parameter_order(self):
        """Test that existing parameters keep their order and host comes last."""
        result = UrlLocalizer().localize("https://h.example/p?b=2&a=1")
        assert result == "/p?b=2&a=1&host=h.example"

    def test_existing_host_parameter_is_replaced(self):
        """Test that a pre-existing host parameter is overwritten."""
        result = UrlLocalizer().localize("https://real.example/p?host=fake.example")
        assert _query(result)["host"] == ["real.example"]

    @pytest.mark.parametrize(
        "url",
        ["", None, "/relative/path?x=1", "not a url", "http://[::1/broken", 12345, {"bad": 1}, ["x"]],
    )
    def test_unparseable_urls_are_returned_unchanged(self, url):
        """Test the fail-open contract."""
        assert UrlLocalizer().localize(url) == url


class TestUrlLocalizerEncrypted:
    """Tests for localization with query encryption."""

    def test_requires_encryptor(self):
        """Test that enabling encryption without an encryptor is rejected."""
        with pytest.raises(ValueError):
            UrlLocalizer(encrypt_query_params=True)

    def test_private_params_never_in_clear_text(self, encryption_config):
        """Test that sensitive values only travel inside the ciphertext."""
        localizer = UrlLocalizer.from_config(encryption_config, encryptor=encrypt_query)
        result = localizer.localize(MEDIA_URL)

        assert "secret-token" not in result
        assert "203.0.113.7" not in result
        query = _query(result)
        assert "pot" not in query
        assert "ip" not in query
        assert query["enc"] == ["true"]
        assert query["host"] == ["rr1---sn-abc.googlevideo.com"]
        assert result.startswith("/companion/videoplayback?")

    def test_ciphertext_round_trips(self, encryption_config):
        """Test that the data parameter decrypts to the private pairs."""
        localizer = UrlLocalizer.from_config(encryption_config, encryptor=encrypt_query)
        data = _query(localizer.localize(MEDIA_URL))["data"][0]

        private = json.loads(decrypt_query(data, encryption_config))
        assert private == [["ip", "203.0.113.7"], ["pot", "secret-token"]]

    def test_encryptor_receives_json_pairs(self):
        """Test the payload handed to the encryptor."""
        encryptor = Mock(return_value="CIPHER")
        localizer = UrlLocalizer(encrypt_query_params=True, encryptor=encryptor)

        result = localizer.localize("https://h.example/p?pot=t&itag=1")

        encryptor.assert_called_once_with('[["pot","t"]]')
        assert result == "/p?itag=1&host=h.example&enc=true&data=CIPHER"

    def test_custom_sensitive_params(self):
        """Test that the sensitive key set is configurable."""
        localizer = UrlLocalizer(
            encrypt_query_params=True,
            sensitive_params={"sig"},
            encryptor=lambda payload: "X",
        )
        query = _query(localizer.localize("https://h.example/p?sig=abc&pot=t"))

        assert "sig" not in query
        assert query["pot"] == ["t"]


class TestEncryption:
    """Tests for the query payload encryptor."""

    def test_missing_secret_raises(self):
        """Test that encrypting without a secret is refused."""
        with pytest.raises(ValueError):
            encrypt_query("[]", Mock(ENCRYPTION_SECRET=""))

    def test_ciphertext_hides_plaintext(self, encryption_config):
        """Test that the plaintext does not appear in the token."""
        token = encrypt_query('[["pot","secret-token"]]', encryption_config)

        assert "secret-token" not in token
        assert decrypt_query(token, encryption_config) == '[["pot","secret-token"]]'
