"""
Admission filter for course generation requests.

is_educational_query() is an ordered cascade of phrase and keyword tests, not
a semantic classifier. Order matters: personal and unsafe phrases are checked
before the whitelist, so "i love python" is still rejected.
"""

from __future__ import annotations

from typing import Any, Iterable

# Greetings, affection and relationship talk.
PERSONAL_PHRASES: tuple[str, ...] = (
    "hi", "hii", "hello", "hey", "hey there", "yo", "sup", "what's up", "whats up",
    "good morning", "good afternoon", "good evening", "good night",
    "how are you", "how r u", "how are you doing", "nice to meet you",
    "thank you", "thanks", "bye", "goodbye", "see you",
    "i love you", "love you", "i like you", "i miss you", "miss you",
    "i love", "love me", "kiss me", "kiss", "hug me", "cuddle",
    "marry me", "will you marry me", "be my girlfriend", "be my boyfriend",
    "date me", "go on a date", "my girlfriend", "my boyfriend", "my crush",
    "my wife", "my husband", "relationship advice", "breakup", "break up with",
    "are you single", "you are cute", "you're cute",
)

# Violence, illegal activity, self-harm, academic dishonesty, security bypass.
FORBIDDEN_PHRASES: tuple[str, ...] = (
    "bomb", "make a bomb", "build a bomb", "explosive", "explosives", "weapon", "weapons",
    "kill someone", "kill a person", "how to kill", "murder", "poison someone", "terrorist", "terrorism",
    "buy drugs", "sell drugs", "cook meth", "make meth", "steal", "shoplift", "money laundering",
    "credit card fraud", "counterfeit", "fake id", "fake passport",
    "suicide", "kill myself", "self harm", "self-harm", "hurt myself", "end my life",
    "cheat on exam", "cheat on my exam", "cheat in exam", "do my homework", "write my essay",
    "plagiarize", "plagiarism tool", "exam answers",
    "hack into", "hack someone", "hack my ex", "hack facebook", "hack instagram", "hack wifi",
    "bypass security", "bypass authentication", "bypass login", "crack password", "crack passwords",
    "steal passwords", "create malware", "write malware", "create ransomware", "ddos attack",
    "phishing kit", "keylogger",
)

# Known technical and engineering topics.
EDUCATIONAL_TOPICS: tuple[str, ...] = (
    "algorithms", "data structures", "programming", "software engineering",
    "machine learning", "deep learning", "artificial intelligence", "computer graphics",
    "databases", "sql", "javascript", "typescript", "python", "java", "c++", "golang",
    "react", "node.js", "apache", "kafka", "apache kafka", "devops", "docker", "kubernetes",
    "bresenham", "line drawing", "rasterization", "virtual machines", "virtualization",
    "operating systems", "computer networks", "system design", "distributed systems",
    "cloud computing", "cybersecurity", "cryptography", "web development", "mobile development",
    "version control", "microservices", "graphql", "rest api",
    "circuit analysis", "electronics", "signal processing", "control systems", "embedded systems",
    "thermodynamics", "fluid mechanics", "materials science", "structural engineering",
    "linear algebra", "calculus", "statistics",
)

# Stems that mark a free-form query as technical.
TECHNICAL_KEYWORDS: tuple[str, ...] = (
    "algorithm", "program", "code", "coding", "software", "develop", "engineer",
    "computer", "comput", "science", "learn", "tutorial", "data", "database",
    "network", "circuit", "system", "architecture", "compiler", "kernel", "protocol",
    "security", "crypt", "math", "calculus", "physics", "mechanic", "electr", "robot",
    "api", "web", "cloud", "server", "function", "structure", "graph", "tree", "sort",
    "search", "logic", "statistic", "neural", "theory", "analysis", "automat",
    "framework", "library", "language", "design pattern", "processor", "memory",
)

MAX_WORDS_WITHOUT_KEYWORD = 3


def _contains_phrase(query: str, phrases: Iterable[str]) -> bool:
    """Phrase equals the query, starts it, ends it, or appears inside it, always on word boundaries."""
    for phrase in phrases:
        if (
            query == phrase
            or query.startswith(phrase + " ")
            or query.endswith(" " + phrase)
            or f" {phrase} " in query
        ):
            return True
    return False


def is_personal_query(query: str) -> bool:
    return _contains_phrase(query, PERSONAL_PHRASES)


def is_forbidden_query(query: str) -> bool:
    return _contains_phrase(query, FORBIDDEN_PHRASES)


def is_educational_query(query: Any) -> bool:
    if not isinstance(query, str) or not query.strip():
        return False

    q = query.lower().strip()

    if is_personal_query(q):
        return False
    if is_forbidden_query(q):
        return False

    if any(q == topic or topic in q for topic in EDUCATIONAL_TOPICS):
        return True

    has_keyword = any(k in q for k in TECHNICAL_KEYWORDS)
    if not has_keyword and len(q.split()) <= MAX_WORDS_WITHOUT_KEYWORD:
        return False

    return True


NON_EDUCATIONAL_MESSAGE = (
    "Apex generates courses on engineering and technical topics. "
    "Try a subject such as \"data structures\", \"apache kafka\" or \"circuit analysis\"."
)
