"""
Lexicon Store

Static per-role keyword lists, synonym groups, stopwords and phrase lists.

Usage:
    from interview_grader.lexicon import get_lexicon

    lexicon = get_lexicon('backend_node')
    lexicon.top_keywords(15)
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .roles import RoleSkill, UnsupportedRoleError, parse_role, list_roles, ROLE_LABELS
from .taxonomies import (
    FILLER_WORDS, STAR_COMPONENTS, STAR_LABELS, STAR_KEYWORDS, STAR_SUGGESTIONS,
    ROLE_SKILL_KEYWORDS, ROLE_SYNONYM_GROUPS, STOPWORDS,
    OFF_TOPIC_PHRASES, UNRELATED_TOPICS, VAGUE_PHRASES,
)
from .questions import Question, get_questions, get_question, get_random_question


@dataclass(frozen=True)
class Lexicon:
    """Keywords and synonym groups for one role"""
    role: RoleSkill
    keywords: Tuple[str, ...]
    synonym_groups: Tuple[Tuple[str, ...], ...]

    @property
    def label(self) -> str:
        return self.role.label

    def top_keywords(self, n: int) -> Tuple[str, ...]:
        return self.keywords[:n]


_LEXICONS = {
    role: Lexicon(
        role=role,
        keywords=ROLE_SKILL_KEYWORDS[role],
        synonym_groups=ROLE_SYNONYM_GROUPS[role],
    )
    for role in RoleSkill
}


def get_lexicon(role: Union[str, RoleSkill]) -> Lexicon:
    """Get the lexicon for a role id (raises UnsupportedRoleError)"""
    return _LEXICONS[parse_role(role)]


__all__ = [
    'RoleSkill',
    'UnsupportedRoleError',
    'Lexicon',
    'get_lexicon',
    'parse_role',
    'list_roles',
    'ROLE_LABELS',
    'Question',
    'get_questions',
    'get_question',
    'get_random_question',
    'FILLER_WORDS',
    'STAR_COMPONENTS',
    'STAR_LABELS',
    'STAR_KEYWORDS',
    'STAR_SUGGESTIONS',
    'STOPWORDS',
    'OFF_TOPIC_PHRASES',
    'UNRELATED_TOPICS',
    'VAGUE_PHRASES',
]
