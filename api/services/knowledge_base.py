"""
Static engineering taxonomy used to enrich course generation prompts.

find_relevant_context() is a substring match of the topic against domain topics
and concept keys. Results keep taxonomy order and are capped; there is no ranking.
"""

from __future__ import annotations

from typing import Any

MAX_CONTEXT_MATCHES = 5

ENGINEERING_KNOWLEDGE_BASE: dict[str, dict[str, Any]] = {
    "computer_science": {
        "topics": [
            "data structures", "algorithms", "programming languages", "software engineering",
            "databases", "computer networks", "operating systems", "machine learning",
            "artificial intelligence", "cybersecurity", "web development", "mobile development",
            "system design", "distributed systems", "cloud computing", "devops", "computer graphics",
        ],
        "concepts": {
            "data_structures": {
                "linear": ["arrays", "linked lists", "stacks", "queues"],
                "trees": ["binary trees", "BST", "AVL trees", "red-black trees", "heaps"],
                "graphs": ["adjacency matrix", "adjacency list", "weighted graphs"],
                "hashing": ["hash tables", "collision resolution", "load factor"],
            },
            "algorithms": {
                "sorting": ["bubble sort", "merge sort", "quick sort", "heap sort"],
                "searching": ["linear search", "binary search", "depth-first search", "breadth-first search"],
                "graph": ["Dijkstra", "Bellman-Ford", "Floyd-Warshall", "Kruskal", "Prim"],
                "optimization": ["greedy algorithms", "dynamic programming", "divide and conquer"],
            },
            "web_development": {
                "frontend": ["HTML", "CSS", "JavaScript", "React", "Vue", "Angular"],
                "backend": ["Node.js", "Express", "REST APIs", "GraphQL"],
                "databases": ["SQL", "MongoDB", "PostgreSQL", "Redis"],
            },
            "machine_learning": {
                "supervised": ["linear regression", "logistic regression", "decision trees", "random forest", "SVM"],
                "unsupervised": ["k-means clustering", "hierarchical clustering", "PCA"],
                "deep_learning": ["neural networks", "CNN", "RNN", "transformers"],
            },
            "computer_graphics": {
                "rasterization": ["Bresenham line algorithm", "midpoint circle", "scanline fill"],
                "transformations": ["translation", "rotation", "scaling", "homogeneous coordinates"],
                "rendering": ["shading", "z-buffer", "ray tracing"],
            },
        },
    },
    "electrical_engineering": {
        "topics": [
            "circuit analysis", "electronics", "power systems", "control systems",
            "signal processing", "electromagnetics", "microprocessors", "embedded systems",
        ],
        "concepts": {
            "circuit_analysis": {
                "fundamentals": ["Ohm's law", "Kirchhoff's laws", "AC/DC circuits", "impedance"],
                "components": ["resistors", "capacitors", "inductors", "diodes", "transistors"],
                "analysis": ["nodal analysis", "mesh analysis", "Thevenin equivalent"],
            },
            "electronics": {
                "analog": ["amplifiers", "filters", "oscillators", "power supplies"],
                "digital": ["logic gates", "flip-flops", "counters", "microcontrollers"],
            },
        },
    },
    "mechanical_engineering": {
        "topics": [
            "thermodynamics", "fluid mechanics", "materials science", "manufacturing",
            "design engineering", "robotics", "automotive engineering", "aerospace",
        ],
        "concepts": {
            "thermodynamics": {
                "laws": ["first law", "second law", "entropy", "enthalpy"],
                "cycles": ["Carnot cycle", "Otto cycle", "Rankine cycle"],
                "applications": ["heat engines", "refrigeration", "power plants"],
            },
            "fluid_mechanics": {
                "fundamentals": ["pressure", "buoyancy", "fluid statics", "fluid dynamics"],
                "flow": ["laminar flow", "turbulent flow", "boundary layers"],
            },
        },
    },
    "civil_engineering": {
        "topics": [
            "structural engineering", "geotechnical engineering", "transportation",
            "environmental engineering", "construction management", "water resources",
        ],
        "concepts": {
            "structural_engineering": {
                "materials": ["concrete", "steel", "wood", "composite materials"],
                "analysis": ["statics", "dynamics", "structural analysis", "design codes"],
                "structures": ["beams", "columns", "foundations", "bridges"],
            },
        },
    },
}


def _label(key: str) -> str:
    return key.replace("_", " ")


def _matches(topic: str, candidate: str) -> bool:
    c = candidate.lower()
    return c in topic or topic in c


def find_relevant_context(
    topic: str,
    knowledge_base: dict[str, dict[str, Any]] | None = None,
    limit: int = MAX_CONTEXT_MATCHES,
) -> list[dict[str, Any]]:
    """
    Domains whose topics, and concepts whose keys, substring-match the topic (either direction).
    Domain matches look like {"domain", "topics"}; concept matches like {"domain", "concept", "details"}.
    """
    kb = ENGINEERING_KNOWLEDGE_BASE if knowledge_base is None else knowledge_base
    t = (topic or "").lower().strip()
    if not t:
        return []

    context: list[dict[str, Any]] = []
    for domain, data in kb.items():
        matching = [x for x in data.get("topics", []) if _matches(t, x)]
        if matching:
            context.append({"domain": _label(domain), "topics": matching})
        for concept_key, details in data.get("concepts", {}).items():
            if _matches(t, concept_key) or _matches(t, _label(concept_key)):
                context.append({"domain": _label(domain), "concept": _label(concept_key), "details": details})
    return context[:limit]


def context_labels(context: list[dict[str, Any]]) -> list[str]:
    """Short names recorded on a generated course as `ragContext`."""
    if not context:
        return ["general engineering"]
    return [c.get("concept") or c["domain"] for c in context]


def build_context_prompt(topic: str, context: list[dict[str, Any]]) -> str:
    if not context:
        return (
            f'Create a focused engineering course on "{topic}". '
            "Ensure it is educational, practical, and can be completed in 15-30 minutes."
        )

    lines = ["Based on the following engineering knowledge context:", ""]
    for ctx in context:
        if "topics" in ctx:
            lines.append(f"Domain: {ctx['domain']}")
            lines.append(f"Related topics: {', '.join(ctx['topics'])}")
            lines.append("")
        if "concept" in ctx:
            lines.append(f"Concept: {ctx['concept']}")
            for key, values in ctx["details"].items():
                if isinstance(values, list):
                    lines.append(f"{key}: {', '.join(values)}")
            lines.append("")
    return "\n".join(lines)
