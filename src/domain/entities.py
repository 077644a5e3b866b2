from collections.abc import Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums / Literals ---
RecordStatus = Literal["Draft", "Review", "Approved"]
STATUS_VALUES: tuple[RecordStatus, ...] = ("Draft", "Review", "Approved")
DEFAULT_STATUS: RecordStatus = "Draft"

# Sheet columns A..N, in write order. Header text is the wire key.
COLUMN_HEADERS: tuple[str, ...] = (
    "Component Name",
    "Figma Node ID",
    "Category",
    "Status",
    "Usage Guidelines",
    "Content Guidelines",
    "Voice & Tone",
    "Do's",
    "Don'ts",
    "Content Examples",
    "Character Limits",
    "Accessibility Notes",
    "Last Updated",
    "Updated By",
)

# --- Component records ---

class ComponentRecord(BaseModel):
    """One design system component entry, as stored in a single sheet row."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(default="", alias="Component Name")
    figma_node_id: str = Field(default="", alias="Figma Node ID")
    category: str = Field(default="", alias="Category")
    # Free text on load; sheets edited by hand may carry other values
    status: str = Field(default=DEFAULT_STATUS, alias="Status")
    usage_guidelines: str = Field(default="", alias="Usage Guidelines")
    content_guidelines: str = Field(default="", alias="Content Guidelines")
    voice_and_tone: str = Field(default="", alias="Voice & Tone")
    dos: str = Field(default="", alias="Do's")
    donts: str = Field(default="", alias="Don'ts")
    content_examples: str = Field(default="", alias="Content Examples")
    character_limits: str = Field(default="", alias="Character Limits")
    accessibility_notes: str = Field(default="", alias="Accessibility Notes")
    last_updated: str = Field(default="", alias="Last Updated")
    updated_by: str = Field(default="", alias="Updated By")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_cell(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @classmethod
    def from_row(cls, headers: Sequence[str], row: Sequence[Any]) -> "ComponentRecord":
        """Map a sheet row onto a record by header name; short rows pad with ''."""
        data = {
            header: row[index] if index < len(row) else ""
            for index, header in enumerate(headers)
        }
        return cls.model_validate(data)

    def to_row(self) -> list[str]:
        """Serialize into the fixed 14-column order."""
        row = [getattr(self, name) for name in FIELD_NAMES]
        status_index = FIELD_NAMES.index("status")
        row[status_index] = row[status_index] or DEFAULT_STATUS
        return row


FIELD_NAMES: tuple[str, ...] = tuple(ComponentRecord.model_fields)
