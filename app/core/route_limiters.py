"""
Description:
This module sets up a rate limiter for the application using SlowAPI.
Clients are identified by their IP address; routes may set tighter limits than the default.

Dependencies:
- slowapi: For rate limiting functionality.
- slowapi.util: For get_remote_address to retrieve the client's IP address.
- loguru: For logging information about the rate limiter initialization.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger

limiter = Limiter(key_func=get_remote_address, default_limits=["5/minute"])
logger.info("Rate limiter initialized")
