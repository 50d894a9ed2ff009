"""
Question bank per role.

Question ids are stable (fr1, bn1, ds1, ...) so that session results and
exported reports can refer back to them.
"""

import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Optional, Union

from .roles import RoleSkill, parse_role


@dataclass(frozen=True)
class Question:
    id: str
    text: str


def _bank(prefix: str, texts: Iterable[str]):
    return tuple(Question(id=f"{prefix}{i}", text=t) for i, t in enumerate(texts, start=1))


QUESTIONS = MappingProxyType({
    RoleSkill.FRONTEND_REACT: _bank('fr', (
        'Explain reconciliation and keys in React. Give an example from your experience.',
        'Describe a tricky bug you fixed related to React state management.',
        'How do you optimize performance in a React application? Share a specific example.',
        'Explain the difference between useEffect and useLayoutEffect with a real-world use case.',
        'Tell me about a time you debugged a complex React rendering issue.',
        'How do you handle error boundaries in React? Describe an implementation you did.',
        'Explain Context API vs Redux. When did you choose one over the other?',
        'Explain custom hooks you created and the problem they solved.',
        'Describe handling complex forms in React with validation.',
        'How do you approach testing React components? Share a challenging test case.',
    )),
    RoleSkill.BACKEND_NODE: _bank('bn', (
        'How do you design a rate limiter for an API? Describe your implementation.',
        'Tell me about a critical performance bottleneck you identified and resolved in Node.js.',
        'Describe your approach to error handling and logging in a Node.js application.',
        'How do you handle database migrations in production? Share a specific experience.',
        'Describe implementing authentication and session management in an Express app.',
        'Tell me about debugging a memory leak in a Node.js application.',
        'Describe implementing caching strategies in your backend services.',
        'How do you handle background jobs and task queues? Describe your implementation.',
        'Describe setting up monitoring and alerting for a production Node.js service.',
        'Tell me about implementing WebSocket or real-time communication.',
    )),
    RoleSkill.DATA_SQL: _bank('ds', (
        'Explain indexing trade-offs and describe a real incident you handled related to indexes.',
        'Tell me about optimizing a slow-running query. What was your approach?',
        'Describe designing a data model for a complex business domain.',
        'Explain ACID properties and describe a scenario where you ensured them.',
        'Describe debugging data inconsistency issues in a production database.',
        'How do you approach database partitioning or sharding? Share an implementation.',
        'Tell me about optimizing joins and aggregations in complex queries.',
        'Describe working with window functions to solve a complex analytical problem.',
        'How do you approach query performance tuning? Share a detailed example.',
        'How do you monitor and maintain database health in production?',
    )),
})


def get_questions(role: Union[str, RoleSkill]) -> List[Question]:
    """Get all questions for a role"""
    return list(QUESTIONS[parse_role(role)])


def get_question(role: Union[str, RoleSkill], question_id: str) -> Question:
    """Look up a question by id, raising KeyError when absent"""
    for question in QUESTIONS[parse_role(role)]:
        if question.id == question_id:
            return question
    raise KeyError(f"No question '{question_id}' for role '{parse_role(role).value}'")


def get_random_question(
    role: Union[str, RoleSkill],
    rng: Optional[random.Random] = None,
    exclude: Iterable[str] = ()
) -> Question:
    """
    Pick a question for a role, avoiding ids in `exclude` while any remain.

    Pass a seeded random.Random for reproducible sequences.
    """
    rng = rng or random.Random()
    pool = list(QUESTIONS[parse_role(role)])
    excluded = set(exclude)
    remaining = [q for q in pool if q.id not in excluded]
    return rng.choice(remaining or pool)
