from pydantic import BaseModel, Field

from src.domain.entities import STATUS_VALUES

SHEETS_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"


class SheetRules(BaseModel):
    sheet_id: str = ""
    sheet_name: str = "Sheet1"
    range: str = "A1:N1000"
    # Credentials never live in the rules file, only the variable names
    api_key_env: str = "DSCMS_SHEETS_API_KEY"
    sheet_id_env: str = "DSCMS_SHEET_ID"
    base_url: str = SHEETS_BASE_URL
    timeout_seconds: float = 30.0

class CatalogRules(BaseModel):
    categories: list[str] = Field(default_factory=list)
    status_values: list[str] = Field(default_factory=lambda: list(STATUS_VALUES))
    preview_length: int = Field(default=120, gt=0)
    examples_preview_length: int = Field(default=100, gt=0)

class TokensRules(BaseModel):
    path: str = "tokens.json"

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    sheet: SheetRules
    catalog: CatalogRules = Field(default_factory=CatalogRules)
    tokens: TokensRules = Field(default_factory=TokensRules)
    ops: OpsRules = Field(default_factory=OpsRules)
