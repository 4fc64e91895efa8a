"""
API data models.

Course documents (api.models.course_document):
- SectionedCourse, FlatModuleCourse, and the CourseDocument union over them

Stored records are plain dicts owned by api.storage; only course documents
are modelled because their two shapes must be told apart.
"""

from api.models.course_document import (
    CourseDocument,
    CourseModule,
    FlatModuleCourse,
    Section,
    SectionedCourse,
    dump_course_document,
    infer_format,
    parse_course_document,
)

__all__ = [
    "CourseDocument",
    "CourseModule",
    "FlatModuleCourse",
    "Section",
    "SectionedCourse",
    "dump_course_document",
    "infer_format",
    "parse_course_document",
]
