"""
SkillsBarter model layer
Dispute enums, lenient enum normalization, and skill lookups
"""

__version__ = "0.1.0"
