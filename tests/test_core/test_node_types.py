"""Tests for the trigger and integration type tables."""

import pytest

from n8nforge.core.node_types import (
    DEFAULT_INTEGRATION_TYPE,
    DEFAULT_TRIGGER_TYPE,
    resolve_integration_type,
    resolve_trigger_type,
)


class TestTriggerTypes:
    """Trigger kinds are looked up exactly."""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("webhook", "n8n-nodes-base.webhook"),
            ("schedule", "n8n-nodes-base.scheduleTrigger"),
            ("manual", "n8n-nodes-base.manualTrigger"),
            ("chat", "@n8n/n8n-nodes-langchain.chatTrigger"),
        ],
    )
    def test_known_triggers(self, kind, expected):
        assert resolve_trigger_type(kind) == expected

    def test_unknown_trigger_uses_default(self):
        assert resolve_trigger_type("email-received") == DEFAULT_TRIGGER_TYPE

    def test_trigger_lookup_is_case_sensitive(self):
        """Only lowercase kinds are known; anything else degrades to the default."""
        assert resolve_trigger_type("Webhook") == DEFAULT_TRIGGER_TYPE


class TestIntegrationTypes:
    """Integration names are looked up case-insensitively."""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("slack", "n8n-nodes-base.slack"),
            ("Slack", "n8n-nodes-base.slack"),
            ("TELEGRAM", "n8n-nodes-base.telegram"),
            ("email", "n8n-nodes-base.emailSend"),
            ("openai", "@n8n/n8n-nodes-langchain.lmChatOpenAi"),
            ("supabase", "@n8n/n8n-nodes-langchain.supabaseVectorStore"),
            ("http", "n8n-nodes-base.httpRequest"),
        ],
    )
    def test_known_integrations(self, kind, expected):
        assert resolve_integration_type(kind) == expected

    def test_unknown_integration_uses_http_request(self):
        assert resolve_integration_type("linkedin") == DEFAULT_INTEGRATION_TYPE
