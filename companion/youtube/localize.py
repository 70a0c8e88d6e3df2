"""Rewrite media URLs so they route through this server."""

import json
import logging
from typing import Callable, Iterable, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

logger = logging.getLogger(__name__)

DEFAULT_SENSITIVE_PARAMS = frozenset({"pot", "ip"})


class UrlLocalizer:
    """Move a media URL's host into its query and re-root it under ``base_path``.

    When query encryption is enabled, sensitive parameters are removed from
    the query, serialized as JSON ``[key, value]`` pairs and handed to
    ``encryptor``; the result travels as ``data`` next to ``enc=true``.

    Example:
        localizer = UrlLocalizer(base_path="/companion")
        localizer.localize("https://rr1.googlevideo.com/videoplayback?itag=18")
        # "/companion/videoplayback?itag=18&host=rr1.googlevideo.com"
    """

    def __init__(
        self,
        base_path: str = "",
        encrypt_query_params: bool = False,
        sensitive_params: Optional[Iterable[str]] = None,
        encryptor: Optional[Callable[[str], str]] = None,
    ):
        """Initialize the localizer.

        Args:
            base_path: Prefix for every localized path.
            encrypt_query_params: Encrypt sensitive parameters when True.
            sensitive_params: Keys treated as private. Defaults to pot and ip.
            encryptor: Callable turning the private JSON payload into ciphertext.
                Required when encryption is enabled.
        """
        if encrypt_query_params and encryptor is None:
            raise ValueError("An encryptor is required when query encryption is enabled")
        self.base_path = base_path
        self.encrypt_query_params = encrypt_query_params
        self.sensitive_params = frozenset(
            DEFAULT_SENSITIVE_PARAMS if sensitive_params is None else sensitive_params
        )
        self.encryptor = encryptor

    @classmethod
    def from_config(cls, config, encryptor: Optional[Callable[[str, object], str]] = None) -> "UrlLocalizer":
        """Build a localizer from application configuration.

        Args:
            config: Application Config.
            encryptor: ``encrypt_query``-style callable taking (plaintext, config).
        """
        bound = None
        if encryptor is not None:
            def bound(plaintext: str) -> str:
                return encryptor(plaintext, config)
        return cls(
            base_path=config.BASE_PATH,
            encrypt_query_params=config.ENCRYPT_QUERY_PARAMS,
            sensitive_params=config.SENSITIVE_QUERY_PARAMS,
            encryptor=bound,
        )

    def localize(self, url: str) -> str:
        """Return the localized URL, or ``url`` unchanged if it cannot be parsed."""
        if not isinstance(url, str) or not url:
            return url
        try:
            parts = urlsplit(url)
            host = parts.netloc.rpartition("@")[2]
            query = parse_qsl(parts.query, keep_blank_values=True)
        except ValueError as e:
            logger.warning(f"Could not localize URL, returning it unchanged: {e}")
            return url
        if not parts.scheme or not host:
            return url

        params = [(key, value) for key, value in query if key != "host"]
        params.append(("host", host))

        if self.encrypt_query_params:
            public = [(k, v) for k, v in params if k not in self.sensitive_params]
            private = [[k, v] for k, v in params if k in self.sensitive_params]
            ciphertext = self.encryptor(json.dumps(private, separators=(",", ":")))
            params = public + [("enc", "true"), ("data", ciphertext)]

        return f"{self.base_path}{parts.path}?{urlencode(params)}"
