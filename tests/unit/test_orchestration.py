"""
Workflow tests for both entry points with mocked Slack and Intercom.

Run with: pytest tests/unit/test_orchestration.py -v
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from models.context import ConversationContext
from models.ticket import TicketResult
from services.intercom_client import IntercomClient
from services.orchestration_service import TicketWorkflow
from services.ticket_service import TicketService
from utils.error_handling import IntercomApiError, IntercomNetworkError


def _view(metadata, title="Export broken", email="jane@example.com"):
    return {
        "private_metadata": metadata,
        "state": {
            "values": {
                "title_block": {"title_input": {"value": title}},
                "description_block": {"description_input": {"value": "Steps to reproduce"}},
                "email_block": {"email_input": {"value": email}},
                "ticket_type_block": {"ticket_type_select": {"selected_option": None}},
            }
        },
    }


@pytest.fixture
def intercom():
    client = MagicMock()
    client.create_ticket.return_value = TicketResult(
        ticket_id="42", ticket_url="https://app.intercom.com/a/apps/abc123/inbox/conversation/42"
    )
    return client


@pytest.fixture
def workflow(intercom):
    return TicketWorkflow(TicketService(intercom, ticket_type_id="7"))


@pytest.fixture
def metadata():
    return ConversationContext(channel="C123", thread_ts="1700000000.0001", user="U1").to_metadata()


class TestOpenTicketForm:
    def test_opens_modal_with_context(self, workflow, slack_client):
        event = {"channel": "C123", "ts": "1700000000.0001", "user": "U1", "trigger_id": "trig"}

        workflow.open_ticket_form(slack_client, event)

        kwargs = slack_client.views_open.call_args.kwargs
        assert kwargs["trigger_id"] == "trig"
        assert kwargs["view"]["callback_id"] == "ticket_modal"
        assert json.loads(kwargs["view"]["private_metadata"]) == {
            "channel": "C123",
            "thread_ts": "1700000000.0001",
            "user": "U1",
        }

    def test_slack_failure_is_logged_not_raised(self, workflow, slack_client):
        slack_client.views_open.side_effect = RuntimeError("expired_trigger_id")
        event = {"channel": "C123", "ts": "1.0", "user": "U1", "trigger_id": "trig"}

        workflow.open_ticket_form(slack_client, event)

        slack_client.views_open.assert_called_once()


class TestSubmitTicketForm:
    def test_success_posts_to_thread(self, workflow, slack_client, intercom, metadata):
        text = workflow.submit_ticket_form(slack_client, _view(metadata), user_id="U1")

        slack_client.chat_postMessage.assert_called_once_with(
            channel="C123", thread_ts="1700000000.0001", text=text
        )
        assert text.startswith("🎫 Support ticket created successfully!")
        assert "*Ticket ID:* 42" in text
        assert "*Customer:* jane@example.com" in text
        intercom.create_ticket.assert_called_once()

    def test_validation_failure_posts_error_without_calling_intercom(
        self, workflow, slack_client, intercom, metadata
    ):
        text = workflow.submit_ticket_form(slack_client, _view(metadata, email=None))

        intercom.create_ticket.assert_not_called()
        assert text == (
            "❌ Failed to create support ticket: Error: Missing required fields: "
            "title, description, and customer_email are required"
        )
        assert slack_client.chat_postMessage.call_args.kwargs["channel"] == "C123"

    def test_api_error_posts_classified_message(self, workflow, slack_client, intercom, metadata):
        intercom.create_ticket.side_effect = IntercomApiError(422, {"message": "bad request"})

        text = workflow.submit_ticket_form(slack_client, _view(metadata))

        assert text == "❌ Failed to create support ticket: Intercom API error: 422 - bad request"

    def test_network_error_posts_classified_message(self, workflow, slack_client, intercom, metadata):
        intercom.create_ticket.side_effect = IntercomNetworkError()

        text = workflow.submit_ticket_form(slack_client, _view(metadata))

        assert text == "❌ Failed to create support ticket: Network error: Could not reach Intercom API"

    def test_bad_context_falls_back_to_dm(self, workflow, slack_client, intercom):
        text = workflow.submit_ticket_form(slack_client, _view("not json"), user_id="U9")

        intercom.create_ticket.assert_not_called()
        kwargs = slack_client.chat_postMessage.call_args.kwargs
        assert kwargs["channel"] == "U9"
        assert "thread_ts" not in kwargs
        assert text.startswith("❌ Failed to create support ticket: Error: Could not decode")

    def test_bad_context_without_user_is_dropped(self, workflow, slack_client, intercom):
        assert workflow.submit_ticket_form(slack_client, _view(None)) is None

        slack_client.chat_postMessage.assert_not_called()
        intercom.create_ticket.assert_not_called()

    def test_failed_dm_is_dropped(self, workflow, slack_client):
        slack_client.chat_postMessage.side_effect = RuntimeError("channel_not_found")

        assert workflow.submit_ticket_form(slack_client, _view(""), user_id="U9") is None


class TestRunFunction:
    def test_success_returns_outputs(self, workflow, ticket_input):
        outcome = workflow.run_function(ticket_input)

        assert outcome.error is None
        assert outcome.to_dict() == {
            "outputs": {
                "ticket_id": "42",
                "ticket_url": "https://app.intercom.com/a/apps/abc123/inbox/conversation/42",
                "status": "success",
            }
        }

    def test_failure_returns_error_only(self, workflow, intercom, ticket_input):
        intercom.create_ticket.side_effect = RuntimeError("boom")

        outcome = workflow.run_function(ticket_input)

        assert outcome.to_dict() == {"error": "Error: boom"}

    def test_missing_field_never_reaches_intercom(self, workflow, intercom, ticket_input):
        del ticket_input["description"]

        outcome = workflow.run_function(ticket_input)

        assert outcome.outputs is None
        assert outcome.error.startswith("Error: Missing required fields")
        intercom.create_ticket.assert_not_called()

    def test_function_log_leaves_out_customer_email(self, workflow, ticket_input):
        with patch("services.orchestration_service.logger") as mock_logger:
            workflow.run_function(ticket_input)

        extra = mock_logger.info.call_args.kwargs["extra"]
        assert extra == {"title": "Cannot export invoices", "ticket_type": "bug"}
        assert "jane@example.com" not in repr(mock_logger.info.call_args_list)


@patch("requests.sessions.Session.request")
def test_timeout_end_to_end(mock_request, ticket_input):
    """A real IntercomClient timing out surfaces as a network error."""
    mock_request.side_effect = requests.Timeout("read timed out")
    workflow = TicketWorkflow(TicketService(IntercomClient("tok", "abc123")))

    outcome = workflow.run_function(ticket_input)

    assert outcome.error == "Network error: Could not reach Intercom API"
    assert mock_request.call_count == 1
