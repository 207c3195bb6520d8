"""Built-in augmented reality resources."""
import enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict


class ARCategory(enum.Enum):
    biology = "Biology"
    chemistry = "Chemistry"
    physics = "Physics"
    earth_science = "Earth Science"
    astronomy = "Astronomy"
    anatomy = "Anatomy"


class ARResource(BaseModel):
    id: str
    title: str
    subtitle: str
    description: str
    category: ARCategory
    subject: str
    tags: list[str] = []
    grade_level: str
    estimated_minutes: int
    linked_lesson_keywords: list[str] = []

    model_config = ConfigDict(frozen=True)


AR_RESOURCES: tuple[ARResource, ...] = (
    ARResource(
        id="a1b2c3d4-e5f6-7890-abcd-ef1234567890",
        title="Human Cell",
        subtitle="Interactive Animal Cell",
        description=(
            "Explore a fully labeled 3D animal cell. Rotate it, zoom in, and tap "
            "organelles to learn about the nucleus, mitochondria, endoplasmic "
            "reticulum and Golgi apparatus."
        ),
        category=ARCategory.biology,
        subject="Science",
        tags=["cell", "biology", "organelle", "nucleus", "mitochondria", "anatomy", "microscope"],
        grade_level="6-12",
        estimated_minutes=10,
        linked_lesson_keywords=["cell", "biology", "organelle", "nucleus", "mitochondria", "cytoplasm", "membrane"],
    ),
    ARResource(
        id="b2c3d4e5-f6a7-8901-bcde-f12345678901",
        title="Solar System",
        subtitle="Planets in Orbit",
        description=(
            "Place the solar system on your desk and watch the planets orbit the sun. "
            "Compare their sizes and distances and see how the moon's phases form."
        ),
        category=ARCategory.astronomy,
        subject="Science",
        tags=["planets", "orbit", "sun", "moon", "space"],
        grade_level="4-8",
        estimated_minutes=15,
        linked_lesson_keywords=["solar", "planet", "orbit", "moon", "eclipse", "season"],
    ),
    ARResource(
        id="c3d4e5f6-a7b8-9012-cdef-123456789012",
        title="Water Molecule",
        subtitle="Atoms and Bonds",
        description=(
            "Build a water molecule from hydrogen and oxygen atoms and see how "
            "covalent bonds and polarity shape its structure."
        ),
        category=ARCategory.chemistry,
        subject="Science",
        tags=["atom", "molecule", "bond", "chemistry", "water"],
        grade_level="6-10",
        estimated_minutes=8,
        linked_lesson_keywords=["atom", "molecule", "bond", "element", "compound"],
    ),
)

_BY_ID = {resource.id: resource for resource in AR_RESOURCES}


def get_resource(resource_id: str) -> Optional[ARResource]:
    return _BY_ID.get(resource_id.lower())


def list_resources(category: Optional[ARCategory] = None, query: Optional[str] = None) -> list[ARResource]:
    """Resources in a category whose text, tags or category name contain ``query``."""
    result = list(AR_RESOURCES)
    if category is not None:
        result = [r for r in result if r.category == category]
    if query and query.strip():
        needle = query.strip().lower()
        result = [
            r for r in result
            if needle in r.title.lower()
            or needle in r.subtitle.lower()
            or needle in r.description.lower()
            or needle in r.category.value.lower()
            or any(needle in tag.lower() for tag in r.tags)
        ]
    return result


def categories_in_use() -> list[ARCategory]:
    used = {resource.category for resource in AR_RESOURCES}
    return [category for category in ARCategory if category in used]


def match_keywords(keywords: Iterable[str]) -> list[ARResource]:
    """Resources linked to any of the keywords by lesson keyword, tag or title."""
    needles = [k.strip().lower() for k in keywords if k and k.strip()]
    if not needles:
        return []
    matches = []
    for resource in AR_RESOURCES:
        haystack = [*resource.linked_lesson_keywords, *resource.tags, resource.title]
        if any(needle in text.lower() for needle in needles for text in haystack):
            matches.append(resource)
    return matches
