"""Framework lookups and the prompt reference document.

The reference document is a compact Markdown rendering of every stage, asset,
and checklist item. It is built once at startup and handed to the classifier.
"""

from collections.abc import Iterable

from cobuilder.framework.data import STAGES
from cobuilder.framework.models import Asset, Stage


def build_asset_reference(stages: Iterable[Stage] = STAGES) -> str:
    """Render the framework as the Markdown reference embedded in classification prompts.

    Args:
        stages: Framework stages to render, in order.

    Returns:
        Markdown text with one section per stage and one subsection per asset.
    """
    lines: list[str] = []
    for stage in stages:
        lines.append(f"\n## Stage {stage.number}: {stage.title}")
        lines.append(stage.subtitle)
        for asset in stage.assets:
            lines.append(f"\n### Asset #{asset.number}: {asset.title}")
            lines.append(f"Purpose: {asset.purpose}")
            if asset.checklist:
                lines.append("Checklist:")
                for item in asset.checklist:
                    lines.append(f"  - [{item.id}] {item.text}")
    return "\n".join(lines)


def iter_assets(stages: Iterable[Stage] = STAGES) -> Iterable[Asset]:
    """Yield every asset across all stages in framework order."""
    for stage in stages:
        yield from stage.assets


def get_asset(number: int) -> Asset | None:
    """Return the asset with the given number, or None if the framework has none."""
    for asset in iter_assets():
        if asset.number == number:
            return asset
    return None

