"""Slack interactivity webhook router."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response

from cobuilder.llm import MessageClassifier
from cobuilder.models.slack import InteractionPayload
from cobuilder.slack.handlers import handle_interaction
from cobuilder.slack.payloads import parse_interaction_request

router = APIRouter(prefix="", tags=["slack"])


def get_classifier(request: Request) -> MessageClassifier:
    """Return the classifier built at startup (see app lifespan)."""
    return request.app.state.classifier


@router.post("/slack/interactions")
async def slack_interactions(
    request: Request,
    background_tasks: BackgroundTasks,
    payload: InteractionPayload = Depends(parse_interaction_request),
    classifier: MessageClassifier = Depends(get_classifier),
) -> Response:
    """Receive Slack shortcut interactions.

    Slack retries (X-Slack-Retry-Num header) are acknowledged immediately
    to prevent duplicate processing.
    """
    if request.headers.get("X-Slack-Retry-Num"):
        return Response(status_code=200)

    return handle_interaction(payload, background_tasks, classifier)
