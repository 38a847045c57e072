"""Tests for catalog resources, templates and record validation."""

from __future__ import annotations

import pytest

from fxcatalog.catalog.schema import validate_records
from fxcatalog.domain.models import (
    LoadingState,
    LoadResult,
    Resource,
    ResourceSource,
    ResourceType,
    store_key,
)
from fxcatalog.domain.query import SearchOptions
from fxcatalog.domain.templates import is_template, placeholders, render_template
from fxcatalog.errors import CatalogValidationError


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestTemplates:
    def test_render_substitutes_known_keys(self):
        assert render_template("eq=brightness={value}", {"value": 0.2}) == "eq=brightness=0.2"

    def test_unknown_placeholders_left_untouched(self):
        assert render_template("xfade={kind}:duration={duration}", {"kind": "fade"}) == "xfade=fade:duration={duration}"

    def test_booleans_and_none(self):
        assert render_template("{a} {b} {c}", {"a": True, "b": False, "c": None}) == "true false null"

    def test_placeholders_in_first_seen_order(self):
        assert placeholders("{b} {a} {b}") == ["b", "a"]

    def test_is_template(self):
        assert is_template("blur={radius}")
        assert not is_template("grayscale(1)")
        assert not is_template(42)


# ---------------------------------------------------------------------------
# Resource
# ---------------------------------------------------------------------------


class TestResource:
    def test_from_record_core_fields(self):
        resource = Resource.from_record(
            ResourceType.EFFECTS,
            {
                "id": "blur",
                "labels": {"en": "Blur", "de": "Weichzeichner"},
                "category": "basic",
                "tags": ["soft", "soft", "focus"],
                "ffmpegCommand": "boxblur={radius}",
                "params": {"radius": 5},
                "preview": "blur.png",
            },
        )
        assert resource.name == "Blur"
        assert resource.tags == frozenset({"soft", "focus"})
        assert resource.command == "boxblur={radius}"
        assert resource.extra == {"preview": "blur.png"}
        assert resource.label("de") == "Weichzeichner"
        assert resource.label("ja") == "Blur"

    def test_name_falls_back_to_id(self):
        assert Resource.from_record(ResourceType.MUSIC, {"id": "track-1"}).name == "track-1"

    def test_string_description_becomes_localized(self):
        resource = Resource.from_record(ResourceType.FILTERS, {"id": "x", "description": "Warm tone"})
        assert resource.description == {"en": "Warm tone"}

    def test_css_filter_is_command(self):
        resource = Resource.from_record(ResourceType.FILTERS, {"id": "sepia", "cssFilter": "sepia({amount})"})
        assert resource.render({"amount": 0.5}) == "sepia(0.5)"

    def test_render_overlays_defaults(self):
        resource = Resource.from_record(
            ResourceType.EFFECTS,
            {"id": "blur", "ffmpegCommand": "boxblur={radius}:{power}", "params": {"radius": 5, "power": 1}},
        )
        assert resource.render() == "boxblur=5:1"
        assert resource.render({"radius": 9}) == "boxblur=9:1"

    def test_render_without_command(self):
        assert Resource.from_record(ResourceType.MUSIC, {"id": "m"}).render() is None

    def test_resources_are_immutable(self):
        resource = Resource.from_record(ResourceType.EFFECTS, {"id": "blur"})
        with pytest.raises(AttributeError):
            resource.name = "Other"

    def test_to_dict_is_plain_data(self):
        payload = Resource.from_record(ResourceType.EFFECTS, {"id": "blur", "tags": ["b", "a"]}).to_dict()
        assert payload["type"] == "effects"
        assert payload["tags"] == ["a", "b"]


# ---------------------------------------------------------------------------
# Envelopes and keys
# ---------------------------------------------------------------------------


class TestEnvelopes:
    def test_load_result_failure_has_no_data(self):
        result = LoadResult.failure("boom", ResourceSource.LOCAL)
        assert result.success is False
        assert result.data == []
        assert result.error == "boom"
        assert result.timestamp > 0

    def test_load_result_ok_copies_data(self):
        data = [1, 2]
        result = LoadResult.ok(data, ResourceSource.BUILT_IN)
        data.append(3)
        assert result.data == [1, 2]

    def test_loading_state_copy_is_independent(self):
        state = LoadingState(loading_queue=[ResourceSource.LOCAL])
        copy = state.copy(progress=50.0)
        copy.loading_queue.append(ResourceSource.REMOTE)
        assert state.loading_queue == [ResourceSource.LOCAL]
        assert copy.progress == 50.0

    def test_store_key(self):
        assert store_key(ResourceType.EFFECTS, ResourceSource.BUILT_IN) == "effects:built-in"
        assert store_key("music", "imported") == "music:imported"

    def test_search_options_fluent(self):
        options = SearchOptions().matching("blur").in_category("basic").with_tags("soft").paginate(2, 10)
        assert options.query == "blur"
        assert options.category == "basic"
        assert options.tags == ["soft"]
        assert (options.offset, options.limit) == (10, 10)


# ---------------------------------------------------------------------------
# Record validation
# ---------------------------------------------------------------------------


class TestValidateRecords:
    def test_accepts_valid_records(self):
        records = [{"id": "a"}, {"id": "b", "complexity": "advanced"}]
        assert validate_records(records) == records

    def test_requires_array(self):
        with pytest.raises(CatalogValidationError):
            validate_records({"id": "a"})

    def test_requires_id(self):
        with pytest.raises(CatalogValidationError, match="id"):
            validate_records([{"name": "no id"}], origin="effects.json")

    def test_rejects_unknown_complexity(self):
        with pytest.raises(CatalogValidationError):
            validate_records([{"id": "a", "complexity": "extreme"}])

    def test_rejects_duplicate_ids(self):
        with pytest.raises(CatalogValidationError, match="duplicate id 'a'"):
            validate_records([{"id": "a"}, {"id": "a"}])
