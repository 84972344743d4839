"""Popup notification models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import ConfigDict

from ridesharing.models._base import RideshareModel


class PopupType(StrEnum):
    """Visual style token; it has no behavioural effect in the core."""

    DANGER = "Danger"
    WARNING = "Warning"
    SUCCESS = "Success"
    DEFAULT = "Default"


class PopupMessage(RideshareModel):
    """A transient, auto-expiring user-facing message."""

    model_config = ConfigDict(frozen=True)

    uuid: str
    alert_type: PopupType
    text: str
