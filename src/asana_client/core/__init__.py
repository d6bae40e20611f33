"""Core module - exports the transport, option, pager and error types."""

from asana_client.core.client import Client
from asana_client.core.config import ClientConfig, load_config
from asana_client.core.exceptions import (
    APIError,
    AsanaError,
    ConfigurationError,
    DecodeError,
    PageProgressError,
    RequestCancelledError,
    TransportError,
    TransportTimeoutError,
)
from asana_client.core.options import Feature, Options, fields_for, merge_options
from asana_client.core.pager import NextPage, page_all

__all__ = [
    # Exceptions
    "AsanaError",
    "ConfigurationError",
    "TransportError",
    "TransportTimeoutError",
    "RequestCancelledError",
    "APIError",
    "DecodeError",
    "PageProgressError",
    # Options
    "Feature",
    "Options",
    "merge_options",
    "fields_for",
    # Paging
    "NextPage",
    "page_all",
    # Client
    "Client",
    "ClientConfig",
    "load_config",
]
