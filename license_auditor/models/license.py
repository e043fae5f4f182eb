"""License classification model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LicenseClassification(BaseModel):
    """Detected license information for a single dependency."""

    model_config = {"extra": "forbid", "frozen": True}

    type: str = Field(
        default="",
        description="Normalized license identifier (empty if unrecognized)",
    )
    text: str = Field(default="", description="Raw license text found for the dependency")

    @property
    def recognized(self) -> bool:
        """Check if a license type was detected.

        Returns:
            True if type is non-empty, False otherwise.
        """
        return self.type != ""
