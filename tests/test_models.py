"""Tests for the static model catalog."""

import pytest
from pydantic import ValidationError

from puter_provider.models import (
    PICKER_MODEL_IDS,
    PUTER_MODELS,
    ModelInfo,
    default_model_id,
    fallback_model_info,
    lookup,
    picker_model_ids,
    resolve_model_info,
)


class TestLookup:
    """Tests for lookup() over known and unknown identifiers."""

    @pytest.mark.parametrize("model_id", sorted(PUTER_MODELS))
    def test_known_models_have_positive_limits(self, model_id):
        info = lookup(model_id)
        assert info is not None
        assert info.max_tokens > 0
        assert info.context_window > 0

    def test_unknown_model_returns_none(self):
        assert lookup("not-a-real-model") is None

    def test_empty_id_returns_none(self):
        assert lookup("") is None

    def test_known_entry_values(self):
        info = lookup("gpt-4.1")
        assert info.max_tokens == 32768
        assert info.context_window == 1048576
        assert info.supports_images is True

    def test_all_entries_are_free(self):
        """Puter bills the end user; the catalog carries no prices."""
        for info in PUTER_MODELS.values():
            assert info.input_price == 0
            assert info.output_price == 0


class TestDefaults:

    def test_default_model_is_in_catalog(self):
        assert lookup(default_model_id()) is not None

    def test_default_model_id(self):
        assert default_model_id() == "gpt-5-2025-08-07"


class TestImmutability:
    """The catalog is read-only after import."""

    def test_catalog_rejects_assignment(self):
        with pytest.raises(TypeError):
            PUTER_MODELS["new-model"] = fallback_model_info("new-model")

    def test_model_info_is_frozen(self):
        info = lookup("gpt-4o")
        with pytest.raises(ValidationError):
            info.max_tokens = 1

    def test_model_info_rejects_negative_numbers(self):
        with pytest.raises(ValidationError):
            ModelInfo(max_tokens=-1, context_window=1000)


class TestFallback:

    def test_fallback_embeds_model_id(self):
        info = fallback_model_info("acme/model-x")
        assert "acme/model-x" in info.description
        assert info.input_price == 0
        assert info.output_price == 0

    def test_fallback_conservative_defaults(self):
        info = fallback_model_info("anything")
        assert info.max_tokens == 8192
        assert info.context_window == 128000
        assert info.supports_images is True
        assert info.supports_prompt_cache is True

    def test_resolve_prefers_catalog(self):
        assert resolve_model_info("claude") == lookup("claude")

    def test_resolve_falls_back_for_unknown(self):
        assert resolve_model_info("mystery") == fallback_model_info("mystery")


class TestPickerModels:

    def test_picker_ids_are_all_in_catalog(self):
        for model_id in picker_model_ids():
            assert lookup(model_id) is not None, model_id

    def test_picker_order_starts_with_gpt_4o_mini(self):
        assert picker_model_ids()[0] == "gpt-4o-mini"
        assert picker_model_ids()[-1] == "grok-beta"

    def test_picker_ids_unique(self):
        assert len(set(PICKER_MODEL_IDS)) == len(PICKER_MODEL_IDS)

    def test_picker_returns_copy(self):
        ids = picker_model_ids()
        ids.clear()
        assert picker_model_ids()
