"""Framework models: stages, assets, and checklist items."""

from pydantic import BaseModel, ConfigDict


class ChecklistItem(BaseModel):
    """A single checklist item. IDs take the form "<asset>-<index>", e.g. "7-2"."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str


class Asset(BaseModel):
    """One of the framework's numbered deliverables."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    purpose: str
    checklist: tuple[ChecklistItem, ...] = ()


class Stage(BaseModel):
    """A framework stage grouping consecutive assets."""

    model_config = ConfigDict(frozen=True)

    number: str  # Zero-padded, e.g. "00"
    title: str
    subtitle: str
    assets: tuple[Asset, ...]
