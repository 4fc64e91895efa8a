"""
Course documents.

A course is one of two shapes, told apart by the `format` discriminant:
- SectionedCourse: {title, summary, sections: [{title, content (markdown)}]}
  (the fallback library uses this one)
- FlatModuleCourse: {title, description, modules: [{title, description, detailedContent, keyPoints, ...}]}
  (the generation prompt asks for this one)

Both keep any extra keys the generator produced so nothing is lost when stored.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Section(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str = ""
    content: str = ""


class CourseModule(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str = ""
    description: str = ""
    detailedContent: str = ""
    estimatedTime: str | None = None
    topics: list[str] = Field(default_factory=list)
    keyPoints: list[str] = Field(default_factory=list)


class SectionedCourse(BaseModel):
    model_config = ConfigDict(extra="allow")

    format: Literal["sectioned"] = "sectioned"
    title: str
    summary: str = ""
    sections: list[Section] = Field(default_factory=list)

    def summary_text(self) -> str:
        return self.summary

    def body_blocks(self) -> list[str]:
        return [s.content for s in self.sections]


class FlatModuleCourse(BaseModel):
    model_config = ConfigDict(extra="allow")

    format: Literal["modules"] = "modules"
    title: str
    description: str = ""
    modules: list[CourseModule] = Field(default_factory=list)

    def summary_text(self) -> str:
        return self.description

    def body_blocks(self) -> list[str]:
        """The module's own prose (description and detailedContent), one block per module."""
        return ["\n\n".join(p for p in (m.description, m.detailedContent) if p) for m in self.modules]


CourseDocument = Annotated[Union[SectionedCourse, FlatModuleCourse], Field(discriminator="format")]

_course_adapter: TypeAdapter = TypeAdapter(CourseDocument)


def infer_format(raw: dict[str, Any]) -> str | None:
    """Discriminant for a raw document: explicit `format`, else whichever body list it carries."""
    fmt = raw.get("format")
    if fmt in ("sectioned", "modules"):
        return fmt
    if isinstance(raw.get("sections"), list):
        return "sectioned"
    if isinstance(raw.get("modules"), list):
        return "modules"
    return None


def parse_course_document(raw: Any) -> SectionedCourse | FlatModuleCourse:
    """
    Validate a raw dict into the matching course variant.
    Raises ValueError when it has no title or no sections/modules list.
    """
    if not isinstance(raw, dict):
        raise ValueError("course document must be a JSON object")
    fmt = infer_format(raw)
    if fmt is None:
        raise ValueError("course document has neither sections nor modules")
    return _course_adapter.validate_python({**raw, "format": fmt})


def dump_course_document(doc: SectionedCourse | FlatModuleCourse) -> dict[str, Any]:
    return doc.model_dump(mode="json")
