"""Industry Pydantic models."""
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from biztime.services.slugs import slugify


class IndustryCreate(BaseModel):
    """Model for creating an industry."""
    code: Optional[str] = None
    name: Optional[str] = None

    @field_validator("code")
    @classmethod
    def slugify_code(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the code to a lowercase slug."""
        return slugify(v)


class IndustryUpdate(BaseModel):
    """Model for renaming an industry."""
    name: Optional[str] = None


class IndustryCompanyCreate(BaseModel):
    """Body of POST /industries/{code}/companies."""
    comp_code: Optional[str] = None


class IndustryResponse(BaseModel):
    """Industry with the codes of its member companies."""
    code: str
    name: str
    companies: list[str] = Field(default_factory=list)


class IndustryListResponse(BaseModel):
    industries: list[IndustryResponse]


class IndustryEnvelope(BaseModel):
    industry: IndustryResponse
