"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from spinarak.services.dispatcher import Dispatcher
from spinarak.services.http_service import HttpService
from spinarak.services.page_fetcher import PageFetcher
from spinarak import config as env


# Environment variables used by the container (read via `spinarak.config` helpers).
#
# SPINARAK_LOG_LEVEL (str, default: "WARNING")
#   Root log level for diagnostics written to stderr. Normalized to upper case.
#
# SPINARAK_CHUNK_SIZE (int bytes, default: 8192)
#   How many bytes of a response body are read per chunk while scanning.
#
# SPINARAK_MAX_TOKEN_SIZE (int characters | optional)
#   Longest single word the scanner accepts before reporting an error.
#   Unset means the built-in limit of 64 KiB.
ENV = {
    "SPINARAK_LOG_LEVEL": env.log_level(),
    "SPINARAK_CHUNK_SIZE": env.chunk_size(),
    "SPINARAK_MAX_TOKEN_SIZE": env.max_token_size(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for spinarak."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        http_client=providers.Object(requests.get),
        chunk_size=config.SPINARAK_CHUNK_SIZE.as_(int),
    )

    page_fetcher = providers.Singleton(
        PageFetcher,
        http_service=http_service,
        max_token_size=config.SPINARAK_MAX_TOKEN_SIZE,
    )

    dispatcher = providers.Singleton(
        Dispatcher,
        fetcher=page_fetcher,
    )
