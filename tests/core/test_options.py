"""Tests for Options serialization and merge_options."""

import pytest
from pydantic import ValidationError

from asana_client.core.options import (
    DISABLE_HEADER,
    ENABLE_HEADER,
    Feature,
    Options,
    fields_for,
    merge_options,
)
from asana_client.resources.workspaces import TeamMembership

# =============================================================================
# Options Model Tests
# =============================================================================


class TestOptionsModel:
    """Tests for constructing Options."""

    def test_defaults_are_unset(self):
        """A bare Options sets nothing."""
        options = Options()
        assert options.explicit_values() == {}
        assert options.enabled_features == frozenset()
        assert options.pretty is False

    def test_options_are_frozen(self):
        """Options cannot be mutated after construction."""
        options = Options(workspace="123")
        with pytest.raises(ValidationError):
            options.workspace = "456"

    def test_fields_accepts_comma_string(self):
        """A comma-separated string is split into a field tuple."""
        options = Options(fields="name, notes,,completed")
        assert options.fields == ("name", "notes", "completed")

    def test_fields_list_becomes_tuple(self):
        options = Options(fields=["name", "layout"])
        assert options.fields == ("name", "layout")

    def test_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            Options(limit=0)

    def test_features_from_strings(self):
        """Feature values are accepted by their wire names."""
        options = Options(enabled_features=["string_ids", "new_sections"])
        assert options.enabled_features == {Feature.STRING_IDS, Feature.NEW_SECTIONS}

    def test_explicit_none_is_not_set(self):
        """Passing None explicitly does not count as setting a field."""
        options = Options(workspace=None, limit=10)
        assert options.explicit_values() == {"limit": 10}


# =============================================================================
# Serialization Tests
# =============================================================================


class TestOptionsSerialization:
    """Tests for query, body and header serialization."""

    def test_query_params_full(self):
        options = Options(
            workspace="1",
            project="2",
            owner="me",
            fields=("name", "notes"),
            limit=50,
            offset="eyJ0eXAi",
            pretty=True,
        )
        assert options.to_query_params() == {
            "workspace": "1",
            "project": "2",
            "owner": "me",
            "opt_fields": "name,notes",
            "limit": "50",
            "offset": "eyJ0eXAi",
            "opt_pretty": "true",
        }

    def test_query_params_empty(self):
        assert Options().to_query_params() == {}

    def test_debug_is_never_serialized(self):
        options = Options(debug=True)
        assert options.to_query_params() == {}
        assert options.to_body_options() == {}
        assert options.to_headers() == {}

    def test_body_options(self):
        options = Options(fields=("name",), limit=10, pretty=True)
        assert options.to_body_options() == {"fields": ["name"], "limit": 10, "pretty": True}

    def test_headers_sorted_and_joined(self):
        options = Options(
            enabled_features={Feature.NEW_TASK_SUBTYPES, Feature.STRING_IDS},
            disabled_features={Feature.NEW_SECTIONS},
        )
        assert options.to_headers() == {
            ENABLE_HEADER: "new_task_subtypes,string_ids",
            DISABLE_HEADER: "new_sections",
        }


# =============================================================================
# merge_options Tests
# =============================================================================


class TestMergeOptions:
    """Tests for merge_options precedence."""

    def test_example_merge(self):
        """Base workspace/limit plus an offset override keeps all three."""
        merged = merge_options(Options(workspace="123", limit=50), [Options(offset="cursor-A")])
        assert merged == Options(workspace="123", limit=50, offset="cursor-A")

    def test_empty_overrides_returns_base(self):
        base = Options(workspace="123")
        assert merge_options(base, []) is base

    def test_none_overrides_are_skipped(self):
        base = Options(workspace="123")
        assert merge_options(base, [None, None]) is base

    def test_later_override_wins(self):
        merged = merge_options(
            Options(limit=10), [Options(limit=20), Options(limit=30), Options(workspace="w")]
        )
        assert merged.limit == 30
        assert merged.workspace == "w"

    def test_unset_fields_do_not_clobber(self):
        merged = merge_options(Options(workspace="123", pretty=True), [Options(limit=5)])
        assert merged.workspace == "123"
        assert merged.pretty is True

    def test_explicit_false_overrides_true(self):
        merged = merge_options(Options(pretty=True), [Options(pretty=False)])
        assert merged.pretty is False

    def test_fields_replaced_not_concatenated(self):
        merged = merge_options(Options(fields=("name", "notes")), [Options(fields=("gid",))])
        assert merged.fields == ("gid",)

    def test_feature_sets_replaced_wholesale(self):
        merged = merge_options(
            Options(enabled_features={Feature.STRING_IDS, Feature.NEW_SECTIONS}),
            [Options(enabled_features={Feature.NEW_TASK_SUBTYPES})],
        )
        assert merged.enabled_features == {Feature.NEW_TASK_SUBTYPES}

    def test_inputs_not_mutated(self):
        base = Options(workspace="123")
        override = Options(offset="A")
        merge_options(base, [override])
        assert base.offset is None
        assert override.workspace is None


# =============================================================================
# fields_for Tests
# =============================================================================


class TestFieldsFor:
    def test_uses_wire_names(self):
        """Aliased fields are requested under their wire names."""
        options = fields_for(TeamMembership)
        assert "gid" in options.fields
        assert "id" not in options.fields
        assert {"is_guest", "team", "user"} <= set(options.fields)
