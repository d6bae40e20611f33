"""asana_client - Asana REST API client with pagination and webhook verification."""

__version__ = "0.3.0"

from asana_client.core import (  # noqa: E402
    APIError,
    AsanaError,
    Client,
    ClientConfig,
    DecodeError,
    Feature,
    NextPage,
    Options,
    PageProgressError,
    TransportError,
    load_config,
    merge_options,
    page_all,
)

__all__ = [
    "__version__",
    "APIError",
    "AsanaError",
    "Client",
    "ClientConfig",
    "DecodeError",
    "Feature",
    "NextPage",
    "Options",
    "PageProgressError",
    "TransportError",
    "load_config",
    "merge_options",
    "page_all",
]
