"""Configuration and rate limiter shared by the web app and its routers."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from companion.config import Config

# Initialize configuration
config = Config()

# Initialize rate limiter
limiter = Limiter(key_func=get_remote_address)
