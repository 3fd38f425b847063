"""Data Access Objects (DAOs) for database operations."""

from skillsbarter.daos.skill_dao import SkillDAO, DatabaseError

__all__ = ["SkillDAO", "DatabaseError"]
