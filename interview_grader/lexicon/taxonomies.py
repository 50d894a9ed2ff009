"""
Interview Taxonomies - Static lexicon data

Contains:
- Filler vocabulary (speech disfluencies)
- STAR keywords (Situation / Task / Action / Result cues)
- Role keywords and synonym groups (per RoleSkill)
- Stopwords
- Off-topic markers, unrelated topics, vague phrases

Everything here is immutable and built once at import time.
"""

from types import MappingProxyType

from .roles import RoleSkill


# ==================== FILLER VOCABULARY ====================

FILLER_WORDS = (
    'um', 'uh', 'like', 'you know', 'sort of', 'kind of', 'i mean',
    'basically', 'actually', 'literally', 'right', 'so',
)

# ==================== STAR TAXONOMY ====================

STAR_COMPONENTS = ('S', 'T', 'A', 'R')

STAR_LABELS = MappingProxyType({
    'S': 'Situation',
    'T': 'Task',
    'A': 'Action',
    'R': 'Result',
})

STAR_KEYWORDS = MappingProxyType({
    'S': (
        'situation', 'context', 'background', 'project', 'team', 'company',
        'previously', 'at my company', 'in my role', 'in my previous',
        'when i was', 'working on', 'worked with', 'dealing with', 'we faced',
        'for example', 'for instance', 'scenario', 'last year', 'client',
        'customer', 'startup', 'environment', 'production', 'experience',
    ),
    'T': (
        'task', 'goal', 'objective', 'challenge', 'problem', 'needed to',
        'had to', 'responsibility', 'responsible for', 'my job', 'assigned',
        'required', 'requirement', 'wanted to', 'trying to', 'issue',
        'difficulty', 'asked to', 'supposed to', 'deadline', 'bottleneck',
        'purpose', 'the aim',
    ),
    'A': (
        'action', 'implemented', 'created', 'built', 'designed', 'developed',
        'i decided', 'i chose', 'i worked', 'my approach', 'first', 'then',
        'next', 'i used', 'i wrote', 'i added', 'i configured', 'i set up',
        'i applied', 'we used', 'we implemented', 'introduced', 'refactored',
        'migrated', 'analyzed', 'profiled', 'investigated', 'debugged',
        'tested', 'deployed', 'configured', 'rewrote',
    ),
    'R': (
        'result', 'outcome', 'impact', 'achieved', 'reduced', 'improved',
        'increased', 'successfully', 'delivered', 'saved', 'metric',
        'percent', '%', 'faster', 'solved', 'fixed', 'optimized', 'finally',
        'ultimately', 'as a result', 'dropped', 'decreased', 'learned',
        'lesson',
    ),
})

STAR_SUGGESTIONS = MappingProxyType({
    'S': 'Start with clear context: describe the situation, project, or environment.',
    'T': 'Clarify your specific task or the challenge you faced.',
    'A': 'Detail the actions YOU took. Use "I" statements and describe your process step-by-step.',
    'R': 'End with measurable results or outcomes. Use metrics, percentages, or concrete achievements.',
})

# ==================== ROLE KEYWORDS ====================

ROLE_SKILL_KEYWORDS = MappingProxyType({
    RoleSkill.FRONTEND_REACT: (
        'jsx', 'tsx', 'state', 'props', 'hooks', 'useeffect', 'usestate',
        'usememo', 'usecallback', 'reconciliation', 'virtual dom', 'fiber',
        'effects', 'context', 'memo', 'render', 'component', 'key', 'ref',
        'lifecycle', 'mount', 'unmount', 'redux', 'zustand', 'routing',
        'react router', 'performance', 'optimization', 'lazy', 'suspense',
        'error boundary', 'portal', 'fragment', 'dom', 'event', 'synthetic',
        'controlled', 'uncontrolled', 'form', 'validation',
    ),
    RoleSkill.BACKEND_NODE: (
        'express', 'middleware', 'api', 'rest', 'graphql', 'rate limit',
        'jwt', 'auth', 'token', 'database', 'db', 'sql', 'nosql', 'mongodb',
        'postgres', 'cache', 'redis', 'memcached', 'queue', 'worker', 'job',
        'bull', 'scaling', 'load', 'cluster', 'async', 'await', 'promise',
        'event loop', 'callback', 'stream', 'buffer', 'http', 'https',
        'socket', 'websocket', 'npm', 'package', 'module', 'require',
        'import', 'export', 'error handling', 'logging', 'monitoring',
        'deployment', 'docker', 'container', 'microservice', 'serverless',
    ),
    RoleSkill.DATA_SQL: (
        'index', 'indexes', 'join', 'inner join', 'left join', 'outer join',
        'query plan', 'explain', 'normalization', '1nf', '2nf', '3nf',
        'transaction', 'acid', 'isolation', 'commit', 'rollback',
        'aggregate', 'group by', 'having', 'window', 'partition',
        'row_number', 'rank', 'schema', 'table', 'column', 'primary key',
        'foreign key', 'constraint', 'unique', 'null', 'select', 'insert',
        'update', 'delete', 'where', 'order by', 'limit', 'offset',
        'subquery', 'cte', 'view', 'stored procedure', 'trigger', 'function',
        'performance', 'optimization', 'slow query', 'execution plan',
        'statistics', 'cardinality', 'denormalization', 'sharding',
        'replication',
    ),
})

# Terms inside one group count as the same concept during keyword coverage
ROLE_SYNONYM_GROUPS = MappingProxyType({
    RoleSkill.FRONTEND_REACT: (
        ('state', 'setstate', 'usestate', 'statemanagement'),
        ('effect', 'effects', 'useeffect', 'sideeffect', 'lifecycle'),
        ('component', 'components', 'render', 'rerender'),
        ('performance', 'optimization', 'optimize', 'memo', 'usememo', 'usecallback'),
        ('props', 'properties', 'passing'),
        ('hooks', 'hook', 'custom hook'),
        ('dom', 'virtual dom', 'vdom'),
    ),
    RoleSkill.BACKEND_NODE: (
        ('api', 'endpoint', 'route', 'handler'),
        ('database', 'db', 'datastore', 'postgres', 'mongodb'),
        ('auth', 'authentication', 'authorization', 'jwt', 'token'),
        ('async', 'await', 'promise', 'callback'),
        ('performance', 'optimization', 'cache', 'scaling', 'throughput'),
        ('rate', 'throttle', 'throttling', 'quota'),
        ('limit', 'limiter', 'cap'),
        ('queue', 'worker', 'job', 'bull'),
    ),
    RoleSkill.DATA_SQL: (
        ('index', 'indexes', 'indices', 'indexing'),
        ('join', 'joins', 'joined', 'joining'),
        ('query', 'queries', 'querying'),
        ('aggregate', 'aggregates', 'aggregation', 'aggregated'),
        ('transaction', 'commit', 'rollback', 'acid'),
        ('slow', 'latency', 'bottleneck'),
    ),
})

# ==================== STOPWORDS ====================

STOPWORDS = frozenset({
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'for', 'from', 'has',
    'he', 'in', 'is', 'it', 'its', 'of', 'on', 'that', 'the', 'to', 'was',
    'will', 'with', 'this', 'but', 'they', 'have', 'had', 'what', 'when',
    'where', 'who', 'which', 'why', 'how', 'we', 'our', 'us', 'i', 'my',
    'me', 'you', 'your', 'so', 'do', 'does', 'did', 'can', 'could', 'would',
    'should', 'about', 'also', 'been', 'being', 'into', 'just', 'than',
    'them', 'then', 'there', 'their', 'these', 'those', 'were', 'give',
    'tell', 'time',
})

# ==================== OFF-TOPIC MARKERS ====================

OFF_TOPIC_PHRASES = (
    "i don't know",
    "i'm not sure",
    "no idea",
    "can't remember",
    "don't recall",
    "never heard of",
    "not familiar",
    "don't understand the question",
    "skip this",
    "pass on this",
    "next question",
)

UNRELATED_TOPICS = (
    'football', 'basketball', 'soccer', 'sports', 'shopping', 'cooking',
    'recipe', 'vacation', 'holiday', 'movie', 'film', 'music', 'song',
    'weather', 'restaurant', 'food', 'gaming',
)

# ==================== VAGUENESS ====================

VAGUE_PHRASES = (
    'you know', 'like i said', 'kind of', 'sort of', 'i guess', 'maybe',
    'probably', 'i think', 'basically', 'actually', 'stuff', 'things like that',
)
