"""
Skill catalogue models
Relations are kept as foreign keys; related rows are loaded through SkillDAO
"""

from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar
from uuid import UUID
from pydantic import BaseModel, Field

from skillsbarter.models.enums import OfferStatusCode

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SkillCategory(BaseModel):
    """Category a skill belongs to, keyed by its code"""
    code: str = Field(..., description="Natural key, e.g. 'programming'")
    label: str = Field(default="", description="Display label")

    class Config:
        from_attributes = True


class Skill(BaseModel):
    """A skill users can offer in exchange for others"""
    id: int = Field(..., description="Surrogate key")
    name: str = Field(..., min_length=1)
    category_code: str = Field(..., description="References SkillCategory.code")

    class Config:
        from_attributes = True


class Offer(BaseModel):
    """A user's offer of a skill"""
    id: UUID
    user_id: UUID
    skill_id: int = Field(..., description="References Skill.id")
    title: str
    description: Optional[str] = None
    status_code: OfferStatusCode = Field(default=OfferStatusCode.ACTIVE)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    class Config:
        from_attributes = True


class SkillResponse(BaseModel):
    """Skill with its category label resolved"""
    id: int
    name: str
    category_code: str
    category_label: Optional[str] = None


class GetSkillsRequest(BaseModel):
    """Filter and paging options for skill listings"""
    category_code: Optional[str] = None
    q: Optional[str] = Field(None, description="Case-insensitive name search")
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def validate_paging(self) -> "GetSkillsRequest":
        """Clamp page and page size into their allowed ranges"""
        if self.page < 1:
            self.page = 1
        if self.page_size < 1:
            self.page_size = DEFAULT_PAGE_SIZE
        if self.page_size > MAX_PAGE_SIZE:
            self.page_size = MAX_PAGE_SIZE
        return self

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results plus the total match count"""
    items: List[T] = Field(default_factory=list)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total: int = 0
