"""
Data Access Object for the skill catalogue.
Resolves skill -> category and skill -> offers relations through explicit lookups.
"""

from typing import Dict, List, Optional
import structlog
from supabase import Client

from skillsbarter.config.database import get_db
from skillsbarter.models.skill import (
    GetSkillsRequest,
    Offer,
    PaginatedResponse,
    Skill,
    SkillCategory,
    SkillResponse,
)

logger = structlog.get_logger()

# Characters with special meaning in PostgREST like/ilike patterns
LIKE_SPECIAL_CHARS = ("\\", "%", "_", "*")


class DatabaseError(Exception):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        super().__init__(f"Database error while {operation}: {cause}")


def escape_like(text: str) -> str:
    """Escape like/ilike wildcards so text matches literally."""
    for char in LIKE_SPECIAL_CHARS:
        text = text.replace(char, "\\" + char)
    return text


class SkillDAO:
    """Handles database operations for skills, skill_categories and offers tables."""

    def __init__(self, db_client: Optional[Client] = None):
        """Initialize SkillDAO."""
        self.db = db_client or get_db()
        self.skills_table = "skills"
        self.categories_table = "skill_categories"
        self.offers_table = "offers"

    def get_skill_by_id(self, skill_id: int) -> Optional[Skill]:
        """Retrieve a skill by its ID."""
        try:
            response = (
                self.db.table(self.skills_table)
                .select("*")
                .eq("id", skill_id)
                .execute()
            )
        except Exception as e:
            logger.error("Skill lookup failed", skill_id=skill_id, error=str(e))
            raise DatabaseError("fetching skill", e) from e

        if response.data:
            return Skill(**response.data[0])
        return None

    def get_category(self, code: str) -> Optional[SkillCategory]:
        """Retrieve a skill category by its code."""
        try:
            response = (
                self.db.table(self.categories_table)
                .select("*")
                .eq("code", code)
                .execute()
            )
        except Exception as e:
            logger.error("Category lookup failed", category_code=code, error=str(e))
            raise DatabaseError("fetching category", e) from e

        if response.data:
            return SkillCategory(**response.data[0])
        return None

    def get_skill_response(self, skill_id: int) -> Optional[SkillResponse]:
        """Retrieve a skill with its category label resolved."""
        skill = self.get_skill_by_id(skill_id)
        if skill is None:
            return None

        category = self.get_category(skill.category_code)
        return SkillResponse(
            id=skill.id,
            name=skill.name,
            category_code=skill.category_code,
            category_label=category.label if category else "",
        )

    def create_skill(self, name: str, category_code: str) -> Optional[SkillResponse]:
        """
        Create a skill in an existing category.

        Args:
            name: Skill name, stored trimmed
            category_code: Code of the category the skill belongs to

        Returns:
            SkillResponse for the new skill, or None if the name or category is
            blank, the category does not exist, or the category already has a
            skill with that name
        """
        if not name or not name.strip():
            logger.warning("Create skill failed: empty name")
            return None

        if not category_code or not category_code.strip():
            logger.warning("Create skill failed: empty category code")
            return None

        category = self.get_category(category_code)
        if category is None:
            logger.warning("Create skill failed: category not found", category_code=category_code)
            return None

        name = name.strip()
        try:
            existing = (
                self.db.table(self.skills_table)
                .select("id")
                .eq("name", name)
                .eq("category_code", category_code)
                .execute()
            )
        except Exception as e:
            logger.error("Duplicate skill check failed", name=name, category_code=category_code, error=str(e))
            raise DatabaseError("checking for duplicate skill", e) from e

        if existing.data:
            logger.warning(
                "Create skill failed: duplicate name in category",
                name=name,
                category_code=category_code,
            )
            return None

        try:
            response = (
                self.db.table(self.skills_table)
                .insert({"name": name, "category_code": category_code})
                .execute()
            )
        except Exception as e:
            logger.error("Skill insert failed", name=name, category_code=category_code, error=str(e))
            raise DatabaseError("creating skill", e) from e

        if not response.data:
            raise DatabaseError("creating skill", Exception("no row returned"))

        skill = Skill(**response.data[0])
        logger.info("Skill created", skill_id=skill.id, name=skill.name)

        return SkillResponse(
            id=skill.id,
            name=skill.name,
            category_code=skill.category_code,
            category_label=category.label,
        )

    def list_skills(self, request: GetSkillsRequest) -> PaginatedResponse[SkillResponse]:
        """
        List skills matching the request filters, ordered by name.

        Args:
            request: Category filter, name search and paging; paging is clamped first

        Returns:
            PaginatedResponse of SkillResponse with the total match count
        """
        request.validate_paging()

        try:
            query = self.db.table(self.skills_table).select("*", count="exact")

            if request.category_code and request.category_code.strip():
                query = query.eq("category_code", request.category_code)

            if request.q and request.q.strip():
                query = query.ilike("name", f"%{escape_like(request.q)}%")

            response = (
                query.order("name")
                .range(request.offset, request.offset + request.page_size - 1)
                .execute()
            )
        except Exception as e:
            logger.error("Skill listing failed", request=request.model_dump(), error=str(e))
            raise DatabaseError("listing skills", e) from e

        skills = [Skill(**row) for row in (response.data or [])]
        labels = self._category_labels({skill.category_code for skill in skills})

        items = [
            SkillResponse(
                id=skill.id,
                name=skill.name,
                category_code=skill.category_code,
                category_label=labels.get(skill.category_code, ""),
            )
            for skill in skills
        ]

        total = response.count if response.count is not None else len(items)
        return PaginatedResponse[SkillResponse](
            items=items,
            page=request.page,
            page_size=request.page_size,
            total=total,
        )

    def get_skills_by_category(self, code: str) -> List[Skill]:
        """Get all skills in a category, ordered by name."""
        try:
            response = (
                self.db.table(self.skills_table)
                .select("*")
                .eq("category_code", code)
                .order("name")
                .execute()
            )
        except Exception as e:
            logger.error("Category skills lookup failed", category_code=code, error=str(e))
            raise DatabaseError("fetching skills by category", e) from e

        return [Skill(**row) for row in (response.data or [])]

    def get_offers_for_skill(self, skill_id: int) -> List[Offer]:
        """Get all offers of a skill, newest first."""
        try:
            response = (
                self.db.table(self.offers_table)
                .select("*")
                .eq("skill_id", skill_id)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error("Offer lookup failed", skill_id=skill_id, error=str(e))
            raise DatabaseError("fetching offers", e) from e

        return [Offer(**row) for row in (response.data or [])]

    def _category_labels(self, codes: set) -> Dict[str, str]:
        """Map category codes to labels in one round trip."""
        if not codes:
            return {}

        try:
            response = (
                self.db.table(self.categories_table)
                .select("code, label")
                .in_("code", sorted(codes))
                .execute()
            )
        except Exception as e:
            logger.error("Category label lookup failed", category_codes=sorted(codes), error=str(e))
            raise DatabaseError("fetching category labels", e) from e

        return {row["code"]: row.get("label", "") for row in (response.data or [])}
