"""Classification prompt template.

The framework reference is injected by the caller so the prompt stays a pure
function of its inputs.
"""

DEFAULT_MODEL = "gemini-3-flash-preview"

_CLASSIFICATION_PROMPT = """\
You are a Co-Build framework classification assistant. Given a Slack message from a \
startup team, determine which of the 27 Co-Build assets it most relates to, and extract \
an actionable task.

## The Co-Build Framework
{reference}

## Slack Message Context
Channel: #{channel_name}
Author: {user_name}
Message: "{message_text}"

## Your Task
Analyze this message and determine:
1. Which asset (1-27) this message most relates to
2. If there's a specific checklist item it maps to (use the ID like "1-1", "7-2", etc.), \
or null if no direct match
3. A short, actionable task title (max 100 chars) extracted from the message
4. Priority: "low" (informational), "medium" (should do), "high" (important action), \
"urgent" (blocking/time-sensitive)
5. Confidence score (0-100) for your classification
6. Brief reasoning (1-2 sentences)

Respond with ONLY a JSON object in this exact format:
{{
  "assetNumber": <number 1-27>,
  "checklistItemId": <string like "1-1" or null>,
  "title": "<actionable task title>",
  "priority": "<low|medium|high|urgent>",
  "confidence": <number 0-100>,
  "reasoning": "<brief explanation>"
}}"""


def build_classification_prompt(
    reference: str,
    message_text: str,
    user_name: str,
    channel_name: str,
) -> str:
    """Assemble the single-turn classification prompt.

    Args:
        reference: Markdown framework reference (see build_asset_reference).
        message_text: Raw Slack message text.
        user_name: Display name of the message author.
        channel_name: Channel name without the leading "#".

    Returns:
        Prompt text instructing the model to answer with one JSON object.
    """
    return _CLASSIFICATION_PROMPT.format(
        reference=reference,
        channel_name=channel_name,
        user_name=user_name,
        message_text=message_text,
    )
