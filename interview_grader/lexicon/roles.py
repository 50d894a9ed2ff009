"""
Supported interview roles/skills.

Role ids arrive as strings from the question metadata; they are parsed into
the closed RoleSkill enum here and everything downstream is keyed by it.
"""

from enum import Enum
from typing import Union


class UnsupportedRoleError(ValueError):
    """Raised when a role/skill id has no lexicon."""


class RoleSkill(str, Enum):
    FRONTEND_REACT = 'frontend_react'
    BACKEND_NODE = 'backend_node'
    DATA_SQL = 'data_sql'

    @property
    def label(self) -> str:
        return ROLE_LABELS[self]


ROLE_LABELS = {
    RoleSkill.FRONTEND_REACT: 'React Frontend',
    RoleSkill.BACKEND_NODE: 'Node.js Backend',
    RoleSkill.DATA_SQL: 'Data & SQL',
}


def parse_role(role: Union[str, RoleSkill]) -> RoleSkill:
    """Get RoleSkill for an id, raising UnsupportedRoleError for unknown ids"""
    if isinstance(role, RoleSkill):
        return role
    try:
        return RoleSkill(str(role).strip().lower())
    except ValueError:
        available = ', '.join(r.value for r in RoleSkill)
        raise UnsupportedRoleError(
            f"Unsupported role: '{role}'. Available: {available}"
        ) from None


def list_roles():
    """List supported role ids"""
    return [r.value for r in RoleSkill]
