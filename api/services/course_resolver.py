"""
Course content resolution: live generation first, authored library second.

resolve(topic):
1. Build the prompt from the knowledge-base context.
2. Try each configured model in order; the first that answers wins.
3. Strip code fences, parse JSON and validate it as a course document.
4. Parse failures, empty bodies and generic boilerplate fall through to the library.

Collaborator failures never propagate: they are logged and the library answers.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Optional

from api.config import Settings, get_settings
from api.models.course_document import FlatModuleCourse, SectionedCourse, dump_course_document, parse_course_document
from api.prompt_builders.course import build_course_prompt
from api.services.course_library import build_fallback_course
from api.services.knowledge_base import context_labels, find_relevant_context
from api.utils.common import iso_now
from api.utils.logger import configure_logging
from infra.llm.base import LLM
from infra.llm.factory import create_llm

logger = configure_logging()

LLMFactory = Callable[[str], LLM]

GENERIC_TITLE_PREFIXES = ("Complete Guide to", "Introduction to", "Guide to")
FALLBACK_MESSAGE = "Using enhanced course structure from our library."

_OUTER_FENCE_RE = re.compile(r"^```(?:json)?[ \t]*\n?(.*?)\n?```$", re.DOTALL)
_STRUCTURE_RE = re.compile(r"^\s*(#{1,6}\s|[-*]\s|\d+\.\s)", re.MULTILINE)


@dataclass
class ResolvedCourse:
    document: dict[str, Any]
    source: str  # "ai" | "fallback"
    model: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


def strip_code_fences(text: str) -> str:
    """Remove one fence wrapping the whole reply; fences inside the content are kept."""
    text = (text or "").strip()
    m = _OUTER_FENCE_RE.match(text)
    return (m.group(1) if m else text).strip()


def _is_rich_block(block: str, min_chars: int) -> bool:
    if len(block) < min_chars:
        return False
    return "```" in block or bool(_STRUCTURE_RE.search(block))


def is_generic_template(doc: SectionedCourse | FlatModuleCourse, settings: Settings) -> bool:
    """True when the document looks like boilerplate rather than real course content."""
    title = doc.title or ""
    if title.startswith(GENERIC_TITLE_PREFIXES) and len(title) < settings.generic_title_max_length:
        return True

    first_blocks = doc.body_blocks()[:2]
    rich = sum(1 for b in first_blocks if _is_rich_block(b, settings.generic_section_min_chars))
    if rich < 2:
        return True

    return len(doc.summary_text() or "") < settings.generic_summary_min_chars


class CourseContentResolver:
    def __init__(self, llm_factory: Optional[LLMFactory], model_names: list[str], settings: Settings):
        self.llm_factory = llm_factory
        self.model_names = list(model_names)
        self.settings = settings

    async def _generate(self, prompt: str) -> tuple[Optional[str], Optional[str]]:
        """Raw text and model name from the first model that answers; (None, None) when all fail."""
        if self.llm_factory is None or not self.model_names:
            logger.info("no LLM configured, skipping generation")
            return None, None
        for model in self.model_names:
            try:
                llm = self.llm_factory(model)
                text = await llm.agenerate(prompt)
                logger.info("course generation succeeded model=%s chars=%d", model, len(text or ""))
                return text, model
            except Exception as e:
                logger.warning("course generation failed model=%s error=%s", model, e)
        logger.error("all models failed models=%s", ",".join(self.model_names))
        return None, None

    def _accept(self, text: str) -> Optional[dict[str, Any]]:
        try:
            raw = json.loads(strip_code_fences(text))
            doc = parse_course_document(raw)
        except ValueError as e:
            logger.warning("generated course rejected: unparseable (%s) preview=%r", e, (text or "")[:200])
            return None
        if not doc.title or not doc.body_blocks():
            logger.warning("generated course rejected: missing title or body")
            return None
        if is_generic_template(doc, self.settings):
            logger.warning("generated course rejected: generic template title=%r", doc.title)
            return None
        return dump_course_document(doc)

    async def resolve(self, topic: str) -> ResolvedCourse:
        context = find_relevant_context(topic)
        rag_context = context_labels(context)
        logger.info("resolving course topic=%r context=%s", topic, rag_context)

        text, model = await self._generate(build_course_prompt(topic, context))
        document = self._accept(text) if text else None
        if document is not None:
            document.update({"isAIGenerated": True, "generatedAt": iso_now(), "ragContext": rag_context})
            return ResolvedCourse(document=document, source="ai", model=model)

        document = build_fallback_course(topic)
        document.update(
            {
                "isAIGenerated": False,
                "isFallback": True,
                "fallbackUsed": True,
                "message": FALLBACK_MESSAGE,
                "generatedAt": iso_now(),
                "ragContext": rag_context,
            }
        )
        return ResolvedCourse(document=document, source="fallback")


def build_resolver(settings: Settings) -> CourseContentResolver:
    provider = settings.llm_provider
    if provider == "gemini" and not settings.gemini_configured:
        logger.warning("GEMINI_API_KEY not configured; courses will come from the library")
        return CourseContentResolver(None, [], settings)

    def factory(model: str) -> LLM:
        return create_llm(
            provider,
            model,
            api_key=settings.gemini_api_key,
            base_url=settings.ollama_base_url,
            timeout=settings.llm_timeout_seconds,
        )

    return CourseContentResolver(factory, settings.model_names, settings)


@lru_cache
def get_resolver() -> CourseContentResolver:
    """Process-wide resolver (FastAPI dependency)."""
    return build_resolver(get_settings())
