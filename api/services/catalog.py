"""Predefined course catalog shown on the landing page."""

from typing import Any, Optional

PREDEFINED_COURSES: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Data Structures & Algorithms",
        "description": "Master fundamental DSA concepts",
        "difficulty": "Intermediate",
        "duration": "4 weeks",
        "topics": ["Arrays", "Linked Lists", "Trees", "Graphs", "Sorting", "Searching"],
        "color": "bg-gradient-to-r from-blue-500 to-purple-600",
    },
    {
        "id": 2,
        "title": "Machine Learning Fundamentals",
        "description": "Introduction to ML algorithms and concepts",
        "difficulty": "Beginner",
        "duration": "6 weeks",
        "topics": ["Linear Regression", "Decision Trees", "Neural Networks", "Feature Engineering"],
        "color": "bg-gradient-to-r from-green-500 to-teal-600",
    },
    {
        "id": 3,
        "title": "Web Development with React",
        "description": "Build modern web applications",
        "difficulty": "Intermediate",
        "duration": "5 weeks",
        "topics": ["Components", "State Management", "Hooks", "Router", "API Integration"],
        "color": "bg-gradient-to-r from-orange-500 to-red-600",
    },
    {
        "id": 4,
        "title": "Database Design & SQL",
        "description": "Master database concepts and SQL",
        "difficulty": "Beginner",
        "duration": "3 weeks",
        "topics": ["ER Diagrams", "Normalization", "Queries", "Joins", "Optimization"],
        "color": "bg-gradient-to-r from-indigo-500 to-blue-600",
    },
    {
        "id": 5,
        "title": "System Design",
        "description": "Design scalable distributed systems",
        "difficulty": "Advanced",
        "duration": "8 weeks",
        "topics": ["Load Balancing", "Caching", "Microservices", "Databases", "Scalability"],
        "color": "bg-gradient-to-r from-purple-500 to-pink-600",
    },
    {
        "id": 6,
        "title": "DevOps & Cloud Computing",
        "description": "Learn deployment and cloud services",
        "difficulty": "Intermediate",
        "duration": "6 weeks",
        "topics": ["Docker", "Kubernetes", "AWS", "CI/CD", "Monitoring"],
        "color": "bg-gradient-to-r from-cyan-500 to-blue-600",
    },
]


def get_catalog_course(course_id: int) -> Optional[dict[str, Any]]:
    return next((c for c in PREDEFINED_COURSES if c["id"] == course_id), None)
