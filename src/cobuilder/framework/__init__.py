"""The Co-Build framework: assets numbered 1-27 across seven stages."""

from cobuilder.framework.data import MAX_ASSET_NUMBER, MIN_ASSET_NUMBER, STAGES
from cobuilder.framework.models import Asset, ChecklistItem, Stage
from cobuilder.framework.reference import (
    build_asset_reference,
    get_asset,
    iter_assets,
)

__all__ = [
    "Asset",
    "ChecklistItem",
    "MAX_ASSET_NUMBER",
    "MIN_ASSET_NUMBER",
    "STAGES",
    "Stage",
    "build_asset_reference",
    "get_asset",
    "iter_assets",
]
