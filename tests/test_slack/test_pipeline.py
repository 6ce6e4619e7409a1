"""Tests for the message-shortcut background flow (process_message_shortcut).

Verifies: success path, unlinked channel, classification failure, save failure,
missing text, duplicate handling with and without dedupe, user name fallback,
and that run_message_shortcut never lets an exception escape.
"""

from unittest.mock import AsyncMock, MagicMock, patch
from uuid import UUID

import pytest

from cobuilder.db.models import SlackChannelVentureDB, TaskCreate, TaskDB
from cobuilder.llm.classifier import ClassificationError
from cobuilder.models.classification import ClassificationResult, TaskPriority
from cobuilder.models.slack import InteractionPayload, SlackUser
from cobuilder.slack.handlers import process_message_shortcut, run_message_shortcut

CHANNEL = "C0ADHAF5Y6T"
TS = "1234567890.123456"
USER = "U123"
TEXT = "We need to finalize the pricing page before the investor meeting"
VENTURE_ID = UUID("7b0c1f7e-2f52-4c1e-9a44-4a3c4a1d2b10")


# -- Factories --


def _make_payload(text: str | None = TEXT, channel: str | None = CHANNEL) -> InteractionPayload:
    """Return a message_action payload for the shortcut."""
    data = {
        "type": "message_action",
        "callback_id": "push_to_cobuilder",
        "user": {"id": USER, "name": "ada"},
        "message": {"text": text, "ts": TS},
    }
    if channel is not None:
        data["channel"] = {"id": channel, "name": "venture-acme"}
    return InteractionPayload.model_validate(data)


def _make_mapping() -> SlackChannelVentureDB:
    return SlackChannelVentureDB(
        venture_id=VENTURE_ID,
        slack_channel_id=CHANNEL,
        slack_channel_name="venture-acme",
    )


def _make_classification() -> ClassificationResult:
    return ClassificationResult.model_validate(
        {
            "assetNumber": 99,
            "checklistItemId": None,
            "title": "Finalize pricing page",
            "priority": "urgent",
            "confidence": 150,
            "reasoning": "Pricing work.",
        }
    )


def _mock_settings(*, dedupe: bool = False) -> MagicMock:
    settings = MagicMock()
    settings.dedupe_slack_tasks = dedupe
    settings.slack_callback_id = "push_to_cobuilder"
    return settings


# -- Pipeline patch targets --

_PATCH_PREFIX = "cobuilder.slack.handlers"


def _pipeline_patches(*, dedupe: bool = False):
    """Return a dict of all external calls to patch."""
    return {
        "get_settings": MagicMock(return_value=_mock_settings(dedupe=dedupe)),
        "find_channel_mapping": AsyncMock(return_value=_make_mapping()),
        "find_task_for_message": AsyncMock(return_value=None),
        "get_user_info": AsyncMock(
            return_value=SlackUser(id=USER, name="Ada Lovelace", display_name="ada.l")
        ),
        "get_gemini_client": MagicMock(return_value=MagicMock()),
        "create_task": AsyncMock(return_value=MagicMock()),
        "notify_unlinked": AsyncMock(),
        "notify_duplicate": AsyncMock(),
        "notify_classification_failed": AsyncMock(),
        "notify_save_failed": AsyncMock(),
        "notify_task_created": AsyncMock(),
    }


def _make_classifier(result=None, error: Exception | None = None) -> MagicMock:
    classifier = MagicMock()
    classifier.classify = AsyncMock(return_value=result or _make_classification())
    if error is not None:
        classifier.classify.side_effect = error
    return classifier


@pytest.fixture()
def mocks():
    """Patch every collaborator of the flow and yield the mocks by name."""
    patches = _pipeline_patches()
    started = [patch(f"{_PATCH_PREFIX}.{name}", mock) for name, mock in patches.items()]
    for p in started:
        p.start()
    yield patches
    for p in started:
        p.stop()


# -- Success path --


async def test_success_creates_task_and_confirms(mocks):
    """Linked channel + good classification -> one task and a confirmation reply."""
    classifier = _make_classifier()

    await process_message_shortcut(_make_payload(), classifier)

    mocks["find_channel_mapping"].assert_awaited_once_with(CHANNEL)
    classifier.classify.assert_awaited_once_with(
        mocks["get_gemini_client"].return_value, TEXT, "ada.l", "venture-acme"
    )
    mocks["create_task"].assert_awaited_once()
    mocks["notify_task_created"].assert_awaited_once()
    channel, ts, classification, venture_id = mocks["notify_task_created"].call_args.args
    assert (channel, ts, venture_id) == (CHANNEL, TS, VENTURE_ID)
    assert classification.title == "Finalize pricing page"
    mocks["notify_classification_failed"].assert_not_called()
    mocks["notify_save_failed"].assert_not_called()


async def test_success_task_fields_are_clamped_and_attributed(mocks):
    """assetNumber 99 / confidence 150 are stored as 27 / 100 with Slack metadata."""
    await process_message_shortcut(_make_payload(), _make_classifier())

    data: TaskCreate = mocks["create_task"].call_args.args[0]
    assert data.venture_id == VENTURE_ID
    assert data.asset_number == 27
    assert data.ai_confidence == 100
    assert data.priority == "urgent"
    assert data.status == "open"
    assert data.title == "Finalize pricing page"
    assert data.checklist_item_id is None
    assert data.slack_channel_id == CHANNEL
    assert data.slack_message_ts == TS
    assert data.slack_user_id == USER
    assert data.slack_user_name == "ada.l"
    assert data.ai_reasoning == "Pricing work."


async def test_user_lookup_failure_uses_unknown(mocks):
    """When the user lookup fails, the author is recorded as 'Unknown'."""
    mocks["get_user_info"].return_value = None

    await process_message_shortcut(_make_payload(), _make_classifier())

    assert mocks["create_task"].call_args.args[0].slack_user_name == "Unknown"


async def test_channel_name_falls_back_to_id(mocks):
    """A mapping without a cached name sends the channel ID to the classifier."""
    mapping = _make_mapping()
    mapping.slack_channel_name = None
    mocks["find_channel_mapping"].return_value = mapping
    classifier = _make_classifier()

    await process_message_shortcut(_make_payload(), classifier)

    assert classifier.classify.call_args.args[3] == CHANNEL


# -- Early exits --


async def test_unlinked_channel_notifies_and_stops(mocks):
    """No mapping -> 'not linked' reply, no classification, no task."""
    mocks["find_channel_mapping"].return_value = None
    classifier = _make_classifier()

    await process_message_shortcut(_make_payload(channel="C999"), classifier)

    mocks["notify_unlinked"].assert_awaited_once_with("C999", TS)
    classifier.classify.assert_not_called()
    mocks["create_task"].assert_not_called()


@pytest.mark.parametrize("text", [None, ""])
async def test_missing_text_stops_silently(mocks, text):
    """Nothing to classify -> no lookup, no replies."""
    await process_message_shortcut(_make_payload(text=text), _make_classifier())

    mocks["find_channel_mapping"].assert_not_called()
    mocks["notify_unlinked"].assert_not_called()
    mocks["create_task"].assert_not_called()


async def test_missing_channel_stops_silently(mocks):
    """Without a channel there is nowhere to reply."""
    await process_message_shortcut(_make_payload(channel=None), _make_classifier())

    mocks["find_channel_mapping"].assert_not_called()
    mocks["create_task"].assert_not_called()


async def test_classification_failure_notifies_and_stops(mocks):
    """Classifier error -> failure reply, no task written."""
    classifier = _make_classifier(error=ClassificationError("not json"))

    await process_message_shortcut(_make_payload(), classifier)

    mocks["notify_classification_failed"].assert_awaited_once_with(CHANNEL, TS)
    mocks["create_task"].assert_not_called()
    mocks["notify_task_created"].assert_not_called()


async def test_api_failure_is_a_classification_failure(mocks):
    """Any exception from the model call is reported the same way."""
    classifier = _make_classifier(error=RuntimeError("timeout"))

    await process_message_shortcut(_make_payload(), classifier)

    mocks["notify_classification_failed"].assert_awaited_once()
    mocks["create_task"].assert_not_called()


async def test_save_failure_notifies(mocks):
    """Insert error -> save-failed reply, no confirmation."""
    mocks["create_task"].side_effect = RuntimeError("connection refused")

    await process_message_shortcut(_make_payload(), _make_classifier())

    mocks["notify_save_failed"].assert_awaited_once_with(CHANNEL, TS)
    mocks["notify_task_created"].assert_not_called()


# -- Duplicates --


async def test_duplicates_allowed_by_default(mocks):
    """Without dedupe, the same message twice yields two tasks."""
    classifier = _make_classifier()

    await process_message_shortcut(_make_payload(), classifier)
    await process_message_shortcut(_make_payload(), classifier)

    assert mocks["create_task"].await_count == 2
    mocks["find_task_for_message"].assert_not_called()


async def test_dedupe_skips_known_message(mocks):
    """With dedupe on, a message that already produced a task gets a duplicate reply."""
    mocks["get_settings"].return_value = _mock_settings(dedupe=True)
    existing = TaskDB(venture_id=VENTURE_ID, asset_number=7, title="Finalize pricing page")
    mocks["find_task_for_message"].return_value = existing
    classifier = _make_classifier()

    await process_message_shortcut(_make_payload(), classifier)

    mocks["find_task_for_message"].assert_awaited_once_with(CHANNEL, TS)
    mocks["notify_duplicate"].assert_awaited_once_with(CHANNEL, TS, existing)
    classifier.classify.assert_not_called()
    mocks["create_task"].assert_not_called()


async def test_dedupe_processes_new_message(mocks):
    """With dedupe on, a new message flows through normally."""
    mocks["get_settings"].return_value = _mock_settings(dedupe=True)

    await process_message_shortcut(_make_payload(), _make_classifier())

    mocks["create_task"].assert_awaited_once()
    mocks["notify_duplicate"].assert_not_called()


# -- Background wrapper --


async def test_run_message_shortcut_swallows_errors():
    """An unexpected error in the flow is logged, never raised."""
    with (
        patch(
            f"{_PATCH_PREFIX}.process_message_shortcut",
            new_callable=AsyncMock,
            side_effect=RuntimeError("boom"),
        ),
        patch(f"{_PATCH_PREFIX}.logger") as mock_logger,
    ):
        await run_message_shortcut(_make_payload(), _make_classifier())

    mock_logger.error.assert_called_once()
    assert mock_logger.error.call_args.args[0] == "Background processing failed"
