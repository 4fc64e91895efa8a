"""
Authored fallback courses.

Served when live generation is unavailable or returns boilerplate. Lookup order
in build_fallback_course():
1. direct match: a library key is contained in the topic, or the topic in a key
2. keyword match: reuse a library course as a skeleton, retitled for the topic
3. Bresenham special case: "line" together with "drawing" or "algorithm"
4. generic template with the topic interpolated
"""

from __future__ import annotations

import copy
import re
from typing import Any

from api.utils.logger import configure_logging

logger = configure_logging()

VIRTUAL_MACHINES: dict[str, Any] = {
    "format": "sectioned",
    "title": "Comprehensive Guide to Virtual Machines",
    "summary": (
        "Explore virtualization from the hypervisor up. This course covers how virtual machines are built, "
        "the difference between hypervisor types, how CPU, memory and storage are shared between guests, "
        "and how to run and secure VMs in real infrastructure."
    ),
    "estimatedDurationMinutes": 120,
    "learningObjectives": [
        "Explain what virtualization is and why it underpins modern infrastructure",
        "Compare Type 1 and Type 2 hypervisors and pick one for a workload",
        "Size and configure CPU, memory, disk and network for a virtual machine",
        "Use snapshots, templates and live migration in day-to-day operations",
        "Apply isolation and hardening practices to virtual environments",
    ],
    "prerequisites": [
        "Basic understanding of operating systems",
        "Familiarity with computer hardware components",
        "Some system administration experience (helpful, not required)",
    ],
    "sections": [
        {
            "title": "Introduction to Virtualization",
            "content": """
## What is Virtualization?

Virtualization lets one physical machine present several isolated, simulated computers. A thin
software layer called the hypervisor sits between the hardware and the guests and hands each
virtual machine (VM) its own view of CPU, memory, disks and network cards.

## A Short History

- **1960s**: IBM partitions mainframes with CP-40 and CP-67
- **1999**: VMware brings virtualization to commodity x86 servers
- **2005-2006**: Intel VT-x and AMD-V add hardware support for trapping privileged instructions
- **2010s**: public clouds are built on fleets of hypervisors
- **Today**: VMs coexist with containers and microVMs such as Firecracker

## Why Organizations Virtualize

1. **Consolidation**: run many lightly loaded servers on one host
2. **Isolation**: a crash or compromise in one guest stays inside it
3. **Agility**: create, clone, resize or move machines in minutes
4. **Cost**: less hardware, power, cooling and floor space
5. **Recovery**: whole machines become files that can be backed up and restored
""",
        },
        {
            "title": "Virtual Machine Architecture",
            "content": """
## Anatomy of a VM

- **vCPU**: scheduled onto physical cores by the hypervisor
- **Guest memory**: mapped onto host RAM through a second level of page tables (EPT/NPT)
- **Virtual disks**: files or volumes such as VMDK, VHDX or QCOW2
- **Virtual NICs**: attached to software switches on the host
- **Emulated or paravirtual devices**: virtio drivers avoid the cost of full emulation

## Hypervisor Types

### Type 1 (bare metal)

Runs directly on the hardware with minimal overhead. Examples: VMware ESXi, Microsoft Hyper-V,
Xen, KVM.

### Type 2 (hosted)

Runs as an application on a host operating system. Easier to install, slower under load.
Examples: VirtualBox, VMware Workstation, Parallels Desktop.

## Sharing Resources

- **CPU**: time-slicing, reservations, limits and shares
- **Memory**: ballooning, page sharing, compression and swapping when overcommitted
- **Storage**: thin versus thick provisioning and copy-on-write snapshots
- **Network**: bridged, NAT and host-only modes, VLAN tagging on virtual switches
""",
        },
        {
            "title": "Implementing and Operating Virtual Machines",
            "content": """
## Creating a VM with KVM

```bash
# Create a 20 GB disk image and install Ubuntu into a 2 vCPU / 4 GB guest
qemu-img create -f qcow2 ubuntu.qcow2 20G
virt-install \\
  --name ubuntu-lab --vcpus 2 --memory 4096 \\
  --disk path=ubuntu.qcow2,format=qcow2 \\
  --cdrom ubuntu-24.04-live-server-amd64.iso \\
  --network network=default --os-variant ubuntu24.04
```

## Day-to-Day Operations

- **Snapshots** capture disk and optionally memory state before risky changes
- **Templates** turn a hardened base image into a starting point for new VMs
- **Live migration** moves a running guest between hosts by copying memory pages while it runs
- **Monitoring** watches CPU ready time, memory ballooning and disk latency

## Common Mistakes

1. Keeping snapshots for weeks, which slows disks and fills datastores
2. Overcommitting memory without watching swap activity on the host
3. Skipping guest tools, losing paravirtual drivers and clean shutdowns
""",
        },
        {
            "title": "Security and Best Practices",
            "content": """
## Isolation Is Not Automatic

The hypervisor is a high-value target: an escape from one guest can reach every other guest on
the host. Treat it as critical infrastructure.

## Hardening Checklist

- Patch hypervisors and firmware on a fixed schedule
- Put the management interface on a separate, restricted network
- Remove unused virtual hardware (floppy, serial ports, USB controllers)
- Encrypt virtual disks holding sensitive data
- Separate workloads of different trust levels onto different hosts or clusters

## VMs Versus Containers

| Aspect | Virtual machine | Container |
|--------|-----------------|-----------|
| Isolation boundary | Hardware virtualization | Shared kernel namespaces |
| Boot time | Seconds to minutes | Milliseconds to seconds |
| Guest OS | Any | Same kernel family as host |

Pick VMs when you need a different kernel or a strong isolation boundary; pick containers for
dense packaging of many services that trust the same kernel.
""",
        },
    ],
    "studyNext": [
        "Containers and Docker",
        "Kubernetes Orchestration",
        "Cloud Infrastructure as a Service",
        "Infrastructure as Code",
        "Software-Defined Networking",
    ],
}

MACHINE_LEARNING: dict[str, Any] = {
    "format": "sectioned",
    "title": "Comprehensive Guide to Machine Learning",
    "summary": (
        "Learn how machines learn from data. This course walks through the machine learning workflow, "
        "the main families of supervised and unsupervised algorithms, how to evaluate a model honestly, "
        "and how to avoid the mistakes that make models fail in production."
    ),
    "estimatedDurationMinutes": 150,
    "learningObjectives": [
        "Describe supervised, unsupervised and reinforcement learning and when each applies",
        "Prepare data with cleaning, feature engineering and train/test splits",
        "Train and compare regression, classification and clustering models",
        "Evaluate models with cross-validation and the right metric for the task",
        "Recognize overfitting, data leakage and bias before deployment",
    ],
    "prerequisites": [
        "Basic Python programming",
        "High-school algebra and introductory statistics",
        "Familiarity with tabular data (spreadsheets or CSV files)",
    ],
    "sections": [
        {
            "title": "Foundations of Machine Learning",
            "content": """
## What Machine Learning Is

A machine learning model is a function whose parameters are fitted to examples instead of being
written by hand. Given enough representative data, it generalizes to inputs it has never seen.

## Three Learning Settings

- **Supervised learning**: examples come with labels (price, spam/not spam). Regression predicts
  numbers, classification predicts categories.
- **Unsupervised learning**: no labels; the goal is structure such as clusters or lower
  dimensional representations.
- **Reinforcement learning**: an agent acts in an environment and learns from rewards.

## The Workflow

1. Frame the problem and pick a success metric
2. Collect and clean data
3. Engineer features
4. Split into training, validation and test sets
5. Train candidate models
6. Evaluate, iterate and finally test once on held-out data
7. Deploy and monitor for drift
""",
        },
        {
            "title": "Core Algorithms",
            "content": """
## Linear and Logistic Regression

Linear regression fits `y = w·x + b` by minimizing squared error. Logistic regression passes the
same linear score through a sigmoid to produce a probability for binary classification.

```python
from sklearn.linear_model import LogisticRegression
from sklearn.model_selection import train_test_split

X_train, X_test, y_train, y_test = train_test_split(X, y, test_size=0.2, random_state=42)
model = LogisticRegression(max_iter=1000).fit(X_train, y_train)
print("accuracy:", model.score(X_test, y_test))
```

## Trees and Ensembles

- **Decision trees** split the feature space with if/else rules; easy to read, easy to overfit
- **Random forests** average many trees trained on bootstrap samples
- **Gradient boosting** (XGBoost, LightGBM) adds trees that correct the previous ones' errors

## Unsupervised Methods

- **k-means** assigns points to the nearest of k centroids and recomputes centroids until stable
- **PCA** projects data onto directions of greatest variance for compression and visualization

## Neural Networks

Layers of weighted sums and non-linear activations trained with gradient descent and
backpropagation. Convolutional networks dominate images; transformers dominate text.
""",
        },
        {
            "title": "Evaluating Models",
            "content": """
## Honest Evaluation

A model is only as good as its performance on data it did not train on. Keep a test set aside
and touch it once.

## Cross-Validation

k-fold cross-validation trains k models, each validated on a different fold, and averages the
scores. It gives a more stable estimate than a single split.

## Choosing a Metric

- **Regression**: MAE, RMSE, R²
- **Balanced classification**: accuracy
- **Imbalanced classification**: precision, recall, F1, ROC-AUC or PR-AUC
- **Ranking and recommendation**: precision@k, NDCG

## Bias and Variance

- High bias (underfitting): training and validation error both high; use a richer model or
  better features
- High variance (overfitting): training error low, validation error high; use more data,
  regularization or a simpler model
""",
        },
        {
            "title": "Pitfalls and Practice",
            "content": """
## Mistakes That Sink Projects

1. **Data leakage**: a feature that encodes the label or comes from the future
2. **Preprocessing before splitting**: scaling on the full dataset leaks test statistics
3. **Ignoring class imbalance**: 99% accuracy on a 1% fraud problem means nothing
4. **Tuning on the test set**: the test score stops being an estimate
5. **No baseline**: always compare with a trivial model first

## A Safe Pipeline

```python
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler
from sklearn.ensemble import RandomForestClassifier
from sklearn.model_selection import cross_val_score

pipe = make_pipeline(StandardScaler(), RandomForestClassifier(n_estimators=200))
scores = cross_val_score(pipe, X, y, cv=5, scoring="f1")
print(scores.mean(), scores.std())
```

## After Deployment

- Monitor input distributions and prediction quality for drift
- Version data, code and models together
- Retrain on a schedule or when monitored metrics degrade
""",
        },
    ],
    "studyNext": [
        "Deep Learning",
        "Natural Language Processing",
        "Computer Vision",
        "Reinforcement Learning",
        "MLOps and Model Deployment",
    ],
}

BRESENHAM_LINE: dict[str, Any] = {
    "format": "sectioned",
    "title": "Comprehensive Guide to Bresenham's Line Drawing Algorithm",
    "summary": (
        "Master Bresenham's line drawing algorithm, the classic integer-only technique for rasterizing "
        "lines on pixel displays. This course derives the decision variable, implements the algorithm "
        "for every octant, extends it to circles, and shows where it is still used today."
    ),
    "estimatedDurationMinutes": 90,
    "learningObjectives": [
        "Explain why line rasterization needs an integer-only algorithm",
        "Derive Bresenham's decision variable from the line equation",
        "Implement the algorithm for all slopes and directions",
        "Extend the same idea to the midpoint circle algorithm",
        "Identify uses in graphics hardware, games and CAD systems",
    ],
    "prerequisites": [
        "Basic computer graphics concepts",
        "Coordinate systems and 2D geometry",
        "Programming experience in any language",
    ],
    "sections": [
        {
            "title": "Introduction to Bresenham's Line Algorithm",
            "content": """
## The Rasterization Problem

A mathematical line between (x₁, y₁) and (x₂, y₂) contains infinitely many points, but a display
can only light whole pixels. Rasterization picks the pixels that best approximate the line.

### The Naive Approach

Evaluate `y = m·x + b` for each x and round. This needs a floating-point multiply and a rounding
step per pixel, which was slow on early hardware and accumulates rounding error.

### Bresenham's Insight

Jack Bresenham, working at IBM in 1962, showed that the choice at each step is binary and can be
made by tracking an integer error term:

- only integer addition, subtraction and comparison
- one decision per step along the major axis
- exactly the same pixels as rounding the true line

### Where It Fits

The algorithm is the basis of line drawing in plotters, early raster displays and many
software renderers, and the same incremental idea reappears in circle and ellipse drawing.
""",
        },
        {
            "title": "The Algorithm Explained",
            "content": """
## Deriving the Decision Variable

Consider the first octant (0 ≤ slope ≤ 1) with dx = x₂ − x₁ and dy = y₂ − y₁. After plotting
(x, y) the next pixel is either E = (x+1, y) or NE = (x+1, y+1).

1. Track the error e between the true line and the pixel row
2. If e < ½ choose E, else choose NE and subtract 1 from e
3. Each step adds dy/dx to e
4. Multiply everything by 2·dx to remove fractions: the decision variable starts at
   `d = 2·dy − dx`, adds `2·dy` after an E step and `2·(dy − dx)` after an NE step

### Pseudocode

```
function bresenham(x1, y1, x2, y2):
    dx = x2 - x1
    dy = y2 - y1
    d = 2*dy - dx
    y = y1
    for x from x1 to x2:
        plot(x, y)
        if d > 0:
            y = y + 1
            d = d - 2*dx
        d = d + 2*dy
```

### Worked Example

From (0, 0) to (5, 2): dx = 5, dy = 2, d starts at −1. The plotted pixels are
(0,0), (1,0), (2,1), (3,1), (4,2), (5,2).
""",
        },
        {
            "title": "Implementation for All Octants",
            "content": """
## Handling Every Slope and Direction

The general version steps along whichever axis changes faster and moves in the sign of each
delta, so a single loop covers all eight octants.

```python
def bresenham_line(x0, y0, x1, y1):
    points = []
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        points.append((x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return points
```

## Testing an Implementation

- Horizontal, vertical and 45° lines must produce straight runs of pixels
- Drawing A→B and B→A should light the same pixels (or differ only at ties)
- The pixel count equals max(|dx|, |dy|) + 1
""",
        },
        {
            "title": "Extensions and Applications",
            "content": """
## Midpoint Circle Algorithm

The same incremental decision drives circle drawing. Compute one octant and mirror it eight ways.

```python
def midpoint_circle(cx, cy, r):
    x, y, d = 0, r, 1 - r
    points = []
    while x <= y:
        for px, py in ((x, y), (y, x), (-x, y), (-y, x), (x, -y), (y, -x), (-x, -y), (-y, -x)):
            points.append((cx + px, cy + py))
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1
    return points
```

## Variations

- **Thick lines**: draw parallel offset lines or stamp a brush at each pixel
- **Anti-aliasing**: Xiaolin Wu's algorithm shades the two nearest pixels by coverage
- **Dashed lines**: count steps and skip plotting during gaps

## Real-World Uses

- GPU and plotter rasterization pipelines
- Line-of-sight and grid traversal in games and roguelikes
- Voxel traversal for ray casting
- Tool paths in CNC and CAD/CAM software
""",
        },
    ],
    "studyNext": [
        "Graphics Rasterization Algorithms",
        "Computer Graphics Fundamentals",
        "Xiaolin Wu's Line Algorithm (Anti-aliased Lines)",
        "Cohen-Sutherland Line Clipping",
        "Polygon Filling Algorithms",
    ],
}

LIBRARY: dict[str, dict[str, Any]] = {
    "virtual machines": VIRTUAL_MACHINES,
    "machine learning": MACHINE_LEARNING,
    "bresenham line": BRESENHAM_LINE,
}

SKELETON_KEYWORDS: tuple[str, ...] = (
    "algorithm", "virtual machine", "machine learning", "line drawing", "bresenham",
    "programming", "javascript", "python", "software", "web development", "api",
)


def _generic_template(topic: str) -> dict[str, Any]:
    t = topic
    return {
        "format": "sectioned",
        "title": f"Comprehensive Guide to {t}",
        "summary": (
            f"Dive into {t} with this structured course. Explore the key concepts, the methods "
            f"practitioners rely on, practical applications and where the field is heading."
        ),
        "estimatedDurationMinutes": 120,
        "learningObjectives": [
            f"Understand the fundamental principles of {t}",
            f"Apply {t} concepts to solve real-world problems",
            f"Analyze and compare different approaches in {t}",
            f"Design and implement solutions using {t} techniques",
            f"Evaluate the effectiveness of {t} implementations",
        ],
        "prerequisites": [
            f"Basic understanding of concepts related to {t}",
            "Familiarity with foundational principles in the field",
            "Problem-solving skills and logical thinking",
        ],
        "sections": [
            {
                "title": f"Introduction to {t}",
                "content": f"""
## Overview of {t}

{t} is an area of study with applications across many engineering domains. This introduction
lays out its core ideas, how it developed and where it is used.

## Historical Development

- Early conceptual work and theoretical foundations
- Key innovations that shaped current practice
- Recent advances and the present state of the art
- Emerging trends and open directions

## Core Principles

1. **Foundations**: the definitions every later topic builds on
2. **Structure**: how the main components of {t} relate to each other
3. **Trade-offs**: what each approach gains and what it gives up
4. **Practice**: how the theory turns into working systems

## Key Terminology

Write down each new term of {t} as you meet it together with a one-line definition and an
example; a personal glossary is the fastest way to read papers and documentation in the field.
""",
            },
            {
                "title": f"Core Concepts of {t}",
                "content": f"""
## Conceptual Framework

The concepts of {t} fit together as a small number of interacting components:

### Building Blocks

- Key characteristics and properties
- The role each block plays in the larger system
- Implementation considerations
- Common variations and alternatives

### Theoretical Foundations

1. **Formal models**: the abstractions used to reason about {t}
2. **Analysis methods**: how correctness and performance are judged
3. **Design principles**: rules of thumb distilled from practice

## Methodological Approaches

### Top-Down

Start from requirements and refine into components. Works well when the problem is well
understood.

### Bottom-Up

Start from proven components and compose them. Works well when reusing existing tools.

### Iterative

Build a small working version, measure it, and improve it in short cycles.
""",
            },
            {
                "title": f"Practical Applications of {t}",
                "content": f"""
## Real-World Implementation

Applying {t} in practice involves a repeatable sequence of steps:

1. Define the problem and the measurable goal
2. Survey existing solutions and tools
3. Build a minimal prototype
4. Measure against the goal
5. Harden, document and hand over

## Case Study Pattern

When studying a case of {t} in industry, look for:

- the problem and its constraints
- the approach chosen and the alternatives rejected
- the obstacles met and how they were solved
- the measured results and lessons learned

## Best Practices

- Keep designs simple until measurements demand otherwise
- Automate testing and validation early
- Record decisions together with their reasons
- Review failures without blame and feed the lessons back

## Common Challenges

- Requirements that change mid-project
- Performance that degrades at real-world scale
- Knowledge concentrated in a few people
""",
            },
            {
                "title": f"Advanced Topics in {t}",
                "content": f"""
## Current Developments

{t} keeps evolving. Follow conference proceedings, standards bodies and the changelogs of
major tools to see where practice is moving.

## Specialized Techniques

### Optimization

- Profile before optimizing and target the dominant cost
- Trade memory for time, or precision for speed, deliberately

### Scaling

- Partition work so that parts proceed independently
- Prefer designs whose cost grows gently with input size

## Integration with Related Fields

{t} increasingly combines with neighbouring disciplines. Interfaces between fields are where
many new results appear, so study at least one adjacent area in depth.

## Research Frontiers

- Open theoretical questions
- Tooling that makes existing techniques accessible
- Applications in domains that have not adopted {t} yet
""",
            },
            {
                "title": f"Building Expertise in {t}",
                "content": f"""
## Skill Development Pathway

### Beginner

- Learn the vocabulary and the core principles
- Reproduce worked examples by hand
- Complete small guided exercises

### Intermediate

- Build a project end to end without a tutorial
- Read primary sources and reference documentation
- Compare approaches and justify choices

### Expert

- Contribute improvements back to tools or literature
- Mentor others and review their work
- Keep up with new developments in {t}

## Learning Resources

- Textbooks and university lecture notes for fundamentals
- Official documentation for tools
- Open-source projects for real-world examples
- Communities and forums for questions and code review

## Next Step

Pick one small project that uses {t}, set a one-week deadline, and write down what you learned
when it is done.
""",
            },
        ],
        "studyNext": [
            f"Advanced {t} concepts and techniques",
            f"Specialized applications of {t}",
            f"Integration of {t} with complementary fields",
            f"Emerging trends in {t}",
            f"Research and development in {t}",
        ],
    }


def build_fallback_course(topic: str) -> dict[str, Any]:
    """Library course for `topic`; always returns a sectioned document."""
    normalized = topic.lower().strip()

    for key, course in LIBRARY.items():
        if key in normalized or (normalized and normalized in key):
            logger.info("fallback library direct match key=%s topic=%s", key, topic)
            return {**copy.deepcopy(course), "topic": topic}

    for keyword in SKELETON_KEYWORDS:
        if keyword not in normalized:
            continue
        for key, course in LIBRARY.items():
            if keyword in key:
                logger.info("fallback library skeleton key=%s keyword=%s topic=%s", key, keyword, topic)
                return {
                    **copy.deepcopy(course),
                    "title": f"Comprehensive Guide to {topic}",
                    "topic": topic,
                    "summary": re.sub(re.escape(key), lambda _m: topic, course["summary"], flags=re.IGNORECASE),
                }

    if "bresenham" in normalized or ("line" in normalized and ("drawing" in normalized or "algorithm" in normalized)):
        logger.info("fallback library bresenham special case topic=%s", topic)
        return {**copy.deepcopy(BRESENHAM_LINE), "topic": topic}

    logger.info("fallback library generic template topic=%s", topic)
    return {**_generic_template(topic), "topic": topic}
