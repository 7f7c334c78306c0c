"""Tests for model picker handlers."""

import pytest

from puter_provider import state
from puter_provider.config import ApiHandlerOptions
from puter_provider.handlers import (
    handle_mode_field_change,
    normalize_api_configuration,
    on_mode_change,
    on_model_change,
    render_selection,
)
from puter_provider.models import default_model_id, lookup


class TestHandleModeFieldChange:

    def test_sets_plan_field(self):
        config = handle_mode_field_change(ApiHandlerOptions(), "plan", "gpt-4o")
        assert config.plan_mode_api_model_id == "gpt-4o"
        assert config.act_mode_api_model_id is None

    def test_sets_act_field(self):
        config = handle_mode_field_change(ApiHandlerOptions(), "act", "o3")
        assert config.act_mode_api_model_id == "o3"
        assert config.plan_mode_api_model_id is None

    def test_returns_copy(self):
        original = ApiHandlerOptions(plan_mode_api_model_id="o1")
        updated = handle_mode_field_change(original, "plan", "o3")
        assert original.plan_mode_api_model_id == "o1"
        assert updated.plan_mode_api_model_id == "o3"

    def test_empty_value_clears(self):
        config = handle_mode_field_change(
            ApiHandlerOptions(plan_mode_api_model_id="o1"), "plan", ""
        )
        assert config.plan_mode_api_model_id is None

    def test_preserves_gateway_settings(self):
        original = ApiHandlerOptions(puter_auth_token="tok", puter_api_url="https://x.test")
        updated = handle_mode_field_change(original, "act", "grok-beta")
        assert updated.puter_auth_token == "tok"
        assert updated.puter_api_url == "https://x.test"

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            handle_mode_field_change(ApiHandlerOptions(), "review", "gpt-4o")


class TestNormalizeApiConfiguration:

    def test_selected_model_for_mode(self):
        config = ApiHandlerOptions(plan_mode_api_model_id="o1", act_mode_api_model_id="gpt-4o")
        assert normalize_api_configuration(config, "act") == ("gpt-4o", lookup("gpt-4o"))
        assert normalize_api_configuration(config, "plan") == ("o1", lookup("o1"))

    def test_nothing_selected_describes_default(self):
        selected_id, info = normalize_api_configuration(ApiHandlerOptions(), "plan")
        assert selected_id == ""
        assert info == lookup(default_model_id())

    def test_unknown_selection_synthesizes_info(self):
        config = ApiHandlerOptions(act_mode_api_model_id="custom/model")
        selected_id, info = normalize_api_configuration(config, "act")
        assert selected_id == "custom/model"
        assert "custom/model" in info.description


class TestPickerEvents:

    def test_model_change_writes_state(self):
        view = on_model_change("plan", "claude-sonnet-4")

        assert state.api_configuration.plan_mode_api_model_id == "claude-sonnet-4"
        assert "### claude-sonnet-4" in view
        assert lookup("claude-sonnet-4").description in view

    def test_model_change_leaves_other_mode(self):
        on_model_change("act", "o4-mini")
        on_model_change("plan", "o3")

        assert state.api_configuration.act_mode_api_model_id == "o4-mini"
        assert state.api_configuration.plan_mode_api_model_id == "o3"

    def test_mode_change_returns_mode_selection(self):
        on_model_change("act", "deepseek-reasoner")

        value, view = on_mode_change("act")

        assert value == "deepseek-reasoner"
        assert "deepseek-reasoner" in view

    def test_mode_change_without_selection(self):
        value, view = on_mode_change("plan")

        assert value == ""
        assert f"### {default_model_id()}" in view

    def test_render_selection_uses_state(self):
        state.set_configuration(ApiHandlerOptions(plan_mode_api_model_id="gpt-4.1"))
        assert "1,048,576" in render_selection("plan")
