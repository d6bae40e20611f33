"""Request options - the layered query configuration sent with every call.

This module contains:
- Feature: Server-side opt-in behaviours sent as Asana-Enable/Asana-Disable
- Options: Immutable set of query parameters for a single request
- merge_options: Fold a base Options with call-site overrides
- fields_for: Build an Options that requests every field of a record model

Options are frozen. Merging never mutates its inputs; it returns a new
instance in which later option sets win field by field.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enums
# =============================================================================


class Feature(str, Enum):
    """Opt-in API behaviours that change the shape of server responses."""

    STRING_IDS = "string_ids"
    NEW_SECTIONS = "new_sections"
    NEW_TASK_SUBTYPES = "new_task_subtypes"


ENABLE_HEADER = "Asana-Enable"
DISABLE_HEADER = "Asana-Disable"


# =============================================================================
# Options Model
# =============================================================================


class Options(BaseModel):
    """Query options for one request.

    Only fields passed explicitly (and not None) count as "set" for merging;
    everything else inherits from the option sets merged underneath.
    """

    model_config = ConfigDict(frozen=True)

    workspace: str | None = Field(default=None, description="Workspace filter.")
    project: str | None = Field(default=None, description="Project filter.")
    owner: str | None = Field(default=None, description="Owner filter, e.g. 'me'.")
    fields: tuple[str, ...] | None = Field(
        default=None, description="Fields to return, sent as opt_fields."
    )
    limit: int | None = Field(default=None, ge=1, description="Page size.")
    offset: str | None = Field(default=None, description="Opaque pagination cursor.")
    enabled_features: frozenset[Feature] = Field(
        default_factory=frozenset, description="Features sent in Asana-Enable."
    )
    disabled_features: frozenset[Feature] = Field(
        default_factory=frozenset, description="Features sent in Asana-Disable."
    )
    pretty: bool = Field(default=False, description="Ask the server for indented JSON.")
    debug: bool | None = Field(
        default=None, description="Per-request override of body dumping. Never sent."
    )

    @field_validator("fields", mode="before")
    @classmethod
    def _coerce_fields(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(f.strip() for f in value.split(",") if f.strip())
        return value

    def explicit_values(self) -> dict[str, Any]:
        """Return the fields this option set actually sets."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }

    def to_query_params(self) -> dict[str, str]:
        """Serialize to query-string parameters for GET and DELETE."""
        params: dict[str, str] = {}
        for name in ("workspace", "project", "owner"):
            value = getattr(self, name)
            if value is not None:
                params[name] = value
        if self.fields:
            params["opt_fields"] = ",".join(self.fields)
        if self.limit is not None:
            params["limit"] = str(self.limit)
        if self.offset is not None:
            params["offset"] = self.offset
        if self.pretty:
            params["opt_pretty"] = "true"
        return params

    def to_body_options(self) -> dict[str, Any]:
        """Serialize to the "options" member of a JSON request envelope."""
        options: dict[str, Any] = {}
        for name in ("workspace", "project", "owner", "limit", "offset"):
            value = getattr(self, name)
            if value is not None:
                options[name] = value
        if self.fields:
            options["fields"] = list(self.fields)
        if self.pretty:
            options["pretty"] = True
        return options

    def to_headers(self) -> dict[str, str]:
        """Serialize the feature sets to request headers."""
        headers: dict[str, str] = {}
        if self.enabled_features:
            headers[ENABLE_HEADER] = ",".join(sorted(f.value for f in self.enabled_features))
        if self.disabled_features:
            headers[DISABLE_HEADER] = ",".join(sorted(f.value for f in self.disabled_features))
        return headers


# =============================================================================
# Merging
# =============================================================================


def merge_options(base: Options, overrides: Sequence[Options | None] = ()) -> Options:
    """Merge call-site overrides on top of a base option set.

    Overrides are applied left to right. Each set field replaces the value
    accumulated so far; unset fields are skipped. Collection fields are
    replaced wholesale, not concatenated.

    Args:
        base: The default or caller-level options.
        overrides: More specific option sets, least specific first. None
            entries are ignored.

    Returns:
        A new Options instance, or base itself when nothing overrides it.

    Example:
        >>> merged = merge_options(Options(workspace="123", limit=50), [Options(offset="A")])
        >>> merged.workspace, merged.limit, merged.offset
        ('123', 50, 'A')
    """
    present = [o for o in overrides if o is not None]
    if not present:
        return base

    values = base.explicit_values()
    for override in present:
        values.update(override.explicit_values())
    return Options(**values)


def fields_for(model: type[BaseModel]) -> Options:
    """Build an Options requesting every field declared on a record model.

    Wire names (aliases) are used so the server recognises them.
    """
    names = tuple(info.alias or name for name, info in model.model_fields.items())
    return Options(fields=names)
