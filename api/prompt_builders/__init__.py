"""
App prompt builders. All prompt content and templates live here; services receive built prompts.
"""

from api.prompt_builders.course import build_course_prompt

__all__ = [
    "build_course_prompt",
]
