"""Course generation prompt. The model is asked for a module-format course document."""

from __future__ import annotations

from typing import Any

from api.services.knowledge_base import build_context_prompt
from api.utils.prompt_builder import build_from_template

# Literal braces in the JSON example are doubled for str.format_map.
TEMPLATE_COURSE = """{context_prompt}

You are an engineering professor with many years of teaching experience. Create a detailed, educational course on "{topic}" that gives real understanding in 15-30 minutes.

REQUIREMENTS:
1. Depth: explain each idea in full paragraphs, then summarize it with bullet points.
2. Format: professional language, no emojis, markdown headings and bullet lists inside detailedContent, code blocks where the topic involves code or algorithms.
3. Resources: only real URLs from educational sites (GeeksforGeeks, MDN, Khan Academy, MIT OpenCourseWare, Wikipedia, official documentation).
4. Practice: real-world applications and hands-on examples.

Cover WHY the concepts work, HOW to apply them, WHEN to choose each approach, and WHAT mistakes to avoid.

Reply with ONLY a JSON object in exactly this shape:
{{
  "title": "Specific course title naming the topic",
  "description": "4-5 sentences on what students will learn, why it matters and where it applies.",
  "duration": "20-30 minutes",
  "difficulty": "Intermediate",
  "modules": [
    {{
      "title": "Module title",
      "description": "What this module teaches and why",
      "estimatedTime": "8-12 min",
      "topics": ["topic 1", "topic 2", "topic 3"],
      "detailedContent": "300-400 words of markdown: headings, paragraphs, bullet points and code blocks.",
      "keyPoints": ["point 1", "point 2", "point 3", "point 4"],
      "resources": [{{"title": "...", "url": "...", "type": "article", "description": "..."}}],
      "practiceExercise": "A 5-8 minute exercise with step-by-step instructions",
      "commonMistakes": ["mistake and how to avoid it"]
    }}
  ],
  "prerequisites": ["prerequisite 1", "prerequisite 2"],
  "learningObjectives": ["objective 1", "objective 2", "objective 3"],
  "realWorldApplications": ["application 1", "application 2"],
  "quickReference": ["key formula or rule 1", "key formula or rule 2"],
  "nextSteps": ["next topic 1", "next topic 2"]
}}
"""


def build_course_prompt(topic: str, context: list[dict[str, Any]]) -> str:
    return build_from_template(
        TEMPLATE_COURSE,
        context_prompt=build_context_prompt(topic, context),
        topic=topic,
    ).strip()
