"""Slack channel ID extraction and channel URL building."""

import re

# Checked in order: archive links, client links, then any bare channel-ID token.
CHANNEL_ID_PATTERNS = (
    re.compile(r"/archives/([A-Z0-9]+)"),
    re.compile(r"channel/([A-Z0-9]+)"),
    re.compile(r"(C[A-Z0-9]{8,})"),
)


def extract_slack_channel_id(url_or_id: str | None) -> str | None:
    """Extract a Slack channel ID from a channel URL or a bare ID.

    Supports:
    - https://<workspace>.slack.com/archives/C0ADHAF5Y6T
    - https://app.slack.com/client/T000/C0ADHAF5Y6T style links
    - C0ADHAF5Y6T (direct ID)
    """
    if not url_or_id:
        return None

    candidate = url_or_id.strip()
    if candidate.startswith("C") and len(candidate) > 8 and "/" not in candidate:
        return candidate

    for pattern in CHANNEL_ID_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)

    return None


def build_slack_channel_url(channel_id: str, workspace: str | None = None) -> str:
    """Build a browser URL for a channel.

    Uses the workspace's archive URL when the workspace domain is known,
    otherwise Slack's app_redirect link, which resolves in any workspace.
    """
    if workspace:
        return f"https://{workspace}.slack.com/archives/{channel_id}"
    return f"https://slack.com/app_redirect?channel={channel_id}"
