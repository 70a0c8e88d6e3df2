import os

from dotenv import load_dotenv


def _env_flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    def __init__(self, env_file=None):
        """
        Initialize configuration by loading environment variables and setting default attributes.

        Loads environment variables from the provided .env file path when `env_file` is given; otherwise loads
        from the default environment. After loading, sets the URL localization, query encryption, token minter,
        upstream client and web app settings using environment values with sensible defaults.
        Parameters:
            env_file (str | None): Optional path to a .env file to load environment variables from.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        # Prefix prepended to localized media URLs (e.g. "/companion")
        base_path = os.getenv("BASE_PATH", "")
        if base_path and not base_path.startswith("/"):
            raise ValueError(f"BASE_PATH must start with '/', got: {base_path}")
        self.BASE_PATH = base_path.rstrip("/")

        # Query parameter encryption for localized URLs
        self.ENCRYPT_QUERY_PARAMS = _env_flag("ENCRYPT_QUERY_PARAMS")
        self.ENCRYPTION_SECRET = os.getenv("ENCRYPTION_SECRET", "")
        if self.ENCRYPT_QUERY_PARAMS and not self.ENCRYPTION_SECRET:
            raise ValueError(
                "ENCRYPTION_SECRET must be set when ENCRYPT_QUERY_PARAMS is enabled"
            )

        # Query parameters that never appear in clear text once encrypted
        sensitive = os.getenv("SENSITIVE_QUERY_PARAMS", "pot,ip")
        self.SENSITIVE_QUERY_PARAMS = frozenset(
            key.strip() for key in sensitive.split(",") if key.strip()
        )

        # Proof-of-origin token minting; the video route waits for the minter when enabled
        self.PO_TOKEN_ENABLED = _env_flag("PO_TOKEN_ENABLED")

        # Upstream (innertube) player endpoint
        self.INNERTUBE_API_URL = os.getenv(
            "INNERTUBE_API_URL", "https://www.youtube.com/youtubei/v1/player"
        )
        self.INNERTUBE_CLIENT_NAME = os.getenv("INNERTUBE_CLIENT_NAME", "WEB")
        self.INNERTUBE_CLIENT_VERSION = os.getenv(
            "INNERTUBE_CLIENT_VERSION", "2.20240726.00.00"
        )
        self.INNERTUBE_HL = os.getenv("INNERTUBE_HL", "en")
        self.INNERTUBE_GL = os.getenv("INNERTUBE_GL", "US")
        self.UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "10"))
        if self.UPSTREAM_TIMEOUT <= 0:
            raise ValueError(
                f"UPSTREAM_TIMEOUT must be positive, got {self.UPSTREAM_TIMEOUT}"
            )

        # Web application configuration
        self.WEB_ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")
        self.WEB_RATE_LIMIT = os.getenv("RATE_LIMIT", "60/minute")
        self.WEB_PORT = int(os.getenv("PORT", "8080"))
