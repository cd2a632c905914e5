"""Request body models for the Doohly public API.

Each field carries an explicit wire alias (the API uses camelCase). Bodies
are serialized with ``exclude_unset`` so only the fields a caller actually
provided reach the wire; falsy values such as ``False`` or ``0`` are sent
like any other value.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _RequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_body(self) -> dict[str, Any]:
        """Serialize the provided fields using their wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class BookingFields(_RequestBody):
    """Attributes accepted by the create and update booking endpoints."""

    name: str | None = Field(None, alias="name")
    external_id: str | None = Field(None, alias="externalId")
    plays_per_loop: int | None = Field(None, alias="playsPerLoop")
    loops_per_play: int | None = Field(None, alias="loopsPerPlay")
    play_consecutively: bool | None = Field(None, alias="playConsecutively")
    purchase_type: str | None = Field(None, alias="purchaseType")  # e.g. "Sold", "Bonus"
    campaign: dict[str, Any] | None = Field(None, alias="campaign")
    schedule: dict[str, Any] | None = Field(None, alias="schedule")
    assigned_creatives: list[dict[str, Any]] | None = Field(
        None,
        alias="assignedCreatives",
    )
    assigned_frames: list[dict[str, Any]] | None = Field(None, alias="assignedFrames")
    tags: list[str] | None = Field(None, alias="tags")
    seedooh: dict[str, Any] | None = Field(None, alias="seedooh")
    status: str | None = Field(None, alias="status")


class CreativeUpload(_RequestBody):
    """Parameters for requesting a signed creative upload URL."""

    name: str = Field(alias="name")
    mime_type: str = Field(alias="mimeType")
    file_size: int = Field(alias="fileSize", ge=0)
    playback_scaling: str | None = Field(None, alias="playbackScaling")  # "contain", "cover"
    path: list[str] | None = Field(None, alias="path")


def provided(**fields: Any) -> dict[str, Any]:
    """Drop keyword arguments that were left at ``None``."""
    return {name: value for name, value in fields.items() if value is not None}
