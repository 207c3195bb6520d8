"""Built-in learning standards reference data."""
import re
import uuid
from typing import Iterable, Optional

from .items import LearningStandard

# Stable ids derived from the standard code
_NAMESPACE = uuid.UUID("6f1d3c52-8a0e-4f43-9d38-1b7e2f0c9a11")


def _standard(code: str, title: str, description: str, subject: str, grade_level: str, category: str) -> LearningStandard:
    return LearningStandard(
        id=str(uuid.uuid5(_NAMESPACE, code)),
        code=code,
        title=title,
        description=description,
        subject=subject,
        grade_level=grade_level,
        category=category,
    )


LEARNING_STANDARDS: tuple[LearningStandard, ...] = (
    # Common Core Math
    _standard("CCSS.MATH.6.RP.1", "Understand Ratios",
              "Understand the concept of a ratio and use ratio language to describe a ratio relationship between two quantities.",
              "Math", "6", "Ratios & Proportional Relationships"),
    _standard("CCSS.MATH.6.RP.3", "Ratio & Rate Reasoning",
              "Use ratio and rate reasoning to solve real-world and mathematical problems.",
              "Math", "6", "Ratios & Proportional Relationships"),
    _standard("CCSS.MATH.6.NS.1", "Divide Fractions",
              "Interpret and compute quotients of fractions, and solve word problems involving division of fractions by fractions.",
              "Math", "6", "The Number System"),
    _standard("CCSS.MATH.6.EE.1", "Exponents",
              "Write and evaluate numerical expressions involving whole-number exponents.",
              "Math", "6", "Expressions & Equations"),
    _standard("CCSS.MATH.6.EE.2", "Write Expressions",
              "Write, read, and evaluate expressions in which letters stand for numbers.",
              "Math", "6", "Expressions & Equations"),
    _standard("CCSS.MATH.7.RP.1", "Unit Rates",
              "Compute unit rates associated with ratios of fractions, including ratios of lengths, areas, and other quantities.",
              "Math", "7", "Ratios & Proportional Relationships"),
    _standard("CCSS.MATH.8.F.1", "Understand Functions",
              "Understand that a function is a rule that assigns to each input exactly one output.",
              "Math", "8", "Functions"),
    # Common Core ELA
    _standard("CCSS.ELA-LITERACY.RL.6.1", "Cite Textual Evidence",
              "Cite textual evidence to support analysis of what the text says explicitly as well as inferences drawn from the text.",
              "English", "6", "Reading: Literature"),
    _standard("CCSS.ELA-LITERACY.RL.6.2", "Theme or Central Idea",
              "Determine a theme or central idea of a text and how it is conveyed through particular details.",
              "English", "6", "Reading: Literature"),
    _standard("CCSS.ELA-LITERACY.W.6.1", "Argumentative Writing",
              "Write arguments to support claims with clear reasons and relevant evidence.",
              "English", "6", "Writing"),
    _standard("CCSS.ELA-LITERACY.W.9-10.1", "Argument Development",
              "Write arguments to support claims in an analysis of substantive topics or texts, using valid reasoning and sufficient evidence.",
              "English", "9-10", "Writing"),
    _standard("CCSS.ELA-LITERACY.SL.6.1", "Collaborative Discussions",
              "Engage effectively in a range of collaborative discussions with diverse partners on grade 6 topics, texts, and issues.",
              "English", "6", "Speaking & Listening"),
    # Next Generation Science
    _standard("NGSS.MS-LS1-1", "Cells as Living Things",
              "Conduct an investigation to provide evidence that living things are made of cells.",
              "Science", "6-8", "From Molecules to Organisms"),
    _standard("NGSS.MS-LS1-2", "Cell Parts and Functions",
              "Develop and use a model to describe the function of a cell as a whole and ways the parts of cells contribute to the function.",
              "Science", "6-8", "From Molecules to Organisms"),
    _standard("NGSS.MS-ESS1-1", "Earth-Sun-Moon System",
              "Develop and use a model of the Earth-sun-moon system to describe the cyclic patterns of lunar phases, eclipses, and seasons.",
              "Science", "6-8", "Earth's Place in the Universe"),
    _standard("NGSS.MS-PS1-1", "Atomic Composition",
              "Develop models to describe the atomic composition of simple molecules and extended structures.",
              "Science", "6-8", "Matter and Its Interactions"),
)

_BY_ID = {standard.id: standard for standard in LEARNING_STANDARDS}


def get_standard(standard_id: str) -> Optional[LearningStandard]:
    return _BY_ID.get(standard_id)


def subjects() -> list[str]:
    return sorted({standard.subject for standard in LEARNING_STANDARDS})


def search_standards(subject: Optional[str] = None, query: Optional[str] = None) -> list[LearningStandard]:
    """Standards for a subject whose code, title, description or category contains ``query``."""
    result = list(LEARNING_STANDARDS)
    if subject:
        result = [s for s in result if s.subject.lower() == subject.lower()]
    if query and query.strip():
        needle = query.strip().lower()
        result = [
            s for s in result
            if needle in s.code.lower()
            or needle in s.title.lower()
            or needle in s.description.lower()
            or needle in s.category.lower()
        ]
    return result


def natural_key(text: str) -> list:
    """Sort key that orders embedded numbers numerically ("Grade 2" before "Grade 10")."""
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", text)]


def group_by_category(standards: Iterable[LearningStandard]) -> list[tuple[str, list[LearningStandard]]]:
    """Group standards by category, categories in natural order, members in input order."""
    grouped: dict[str, list[LearningStandard]] = {}
    for standard in standards:
        grouped.setdefault(standard.category, []).append(standard)
    return sorted(grouped.items(), key=lambda entry: natural_key(entry[0]))
