"""
Taxonomy lookup tables and the generic key/display normalizer.

The tables are immutable, process-wide reference data built once at import.
Every function here is pure, so concurrent classifications can share them
without locking.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from civic_triage.models.enums import ComplaintCategory, Department, Severity


E = TypeVar("E", bound=Enum)


# Department -> categories it handles. A category listed under several
# departments (water logging, garbage dumping) resolves to the first one.
DEPARTMENT_CATEGORIES: Mapping[Department, tuple[ComplaintCategory, ...]] = MappingProxyType({
    Department.WATER_SUPPLY: (
        ComplaintCategory.WATER_LOGGING,
        ComplaintCategory.WATER_SHORTAGE,
    ),
    Department.SANITATION: (
        ComplaintCategory.GARBAGE_COLLECTION,
        ComplaintCategory.GARBAGE_DUMPING,
        ComplaintCategory.PUBLIC_TOILET,
    ),
    Department.PUBLIC_WORKS: (
        ComplaintCategory.ROAD_DAMAGE,
        ComplaintCategory.ROAD_CONSTRUCTION,
        ComplaintCategory.MANHOLE_OPEN,
    ),
    Department.ELECTRICITY: (
        ComplaintCategory.STREET_LIGHT,
        ComplaintCategory.POWER_OUTAGE,
    ),
    Department.DRAINAGE: (
        ComplaintCategory.DRAINAGE_BLOCKAGE,
        ComplaintCategory.SEWAGE_OVERFLOW,
        ComplaintCategory.WATER_LOGGING,
    ),
    Department.PARKS_GARDENS: (
        ComplaintCategory.PARK_MAINTENANCE,
        ComplaintCategory.TREE_FALLEN,
    ),
    Department.HEALTH_HYGIENE: (
        ComplaintCategory.MOSQUITO_BREEDING,
        ComplaintCategory.GARBAGE_DUMPING,
    ),
    Department.TRAFFIC_TRANSPORT: (
        ComplaintCategory.TRAFFIC_SIGNAL,
        ComplaintCategory.TRAFFIC_CONGESTION,
        ComplaintCategory.ILLEGAL_PARKING,
    ),
    Department.BUILDING_CONSTRUCTION: (
        ComplaintCategory.ILLEGAL_CONSTRUCTION,
        ComplaintCategory.ENCROACHMENT,
    ),
    Department.MUNICIPAL_CORPORATION: (
        ComplaintCategory.NOISE_POLLUTION,
        ComplaintCategory.AIR_POLLUTION,
        ComplaintCategory.STRAY_ANIMALS,
    ),
    Department.REVENUE: (),
    Department.OTHER: (ComplaintCategory.OTHER,),
})


def _invert_department_table() -> dict[ComplaintCategory, Department]:
    category_department: dict[ComplaintCategory, Department] = {}
    for department, categories in DEPARTMENT_CATEGORIES.items():
        for category in categories:
            category_department.setdefault(category, department)
    return category_department


CATEGORY_DEPARTMENT: Mapping[ComplaintCategory, Department] = MappingProxyType(
    _invert_department_table()
)

CATEGORY_DEFAULT_SEVERITY: Mapping[ComplaintCategory, Severity] = MappingProxyType({
    ComplaintCategory.WATER_LOGGING: Severity.HIGH,
    ComplaintCategory.WATER_SHORTAGE: Severity.HIGH,
    ComplaintCategory.GARBAGE_COLLECTION: Severity.MEDIUM,
    ComplaintCategory.GARBAGE_DUMPING: Severity.MEDIUM,
    ComplaintCategory.ROAD_DAMAGE: Severity.MEDIUM,
    ComplaintCategory.ROAD_CONSTRUCTION: Severity.LOW,
    ComplaintCategory.STREET_LIGHT: Severity.MEDIUM,
    ComplaintCategory.DRAINAGE_BLOCKAGE: Severity.HIGH,
    ComplaintCategory.SEWAGE_OVERFLOW: Severity.HIGH,
    ComplaintCategory.ILLEGAL_CONSTRUCTION: Severity.MEDIUM,
    ComplaintCategory.ENCROACHMENT: Severity.MEDIUM,
    ComplaintCategory.NOISE_POLLUTION: Severity.LOW,
    ComplaintCategory.AIR_POLLUTION: Severity.MEDIUM,
    ComplaintCategory.STRAY_ANIMALS: Severity.LOW,
    ComplaintCategory.TREE_FALLEN: Severity.HIGH,
    ComplaintCategory.PARK_MAINTENANCE: Severity.LOW,
    ComplaintCategory.PUBLIC_TOILET: Severity.MEDIUM,
    ComplaintCategory.TRAFFIC_SIGNAL: Severity.HIGH,
    ComplaintCategory.TRAFFIC_CONGESTION: Severity.MEDIUM,
    ComplaintCategory.ILLEGAL_PARKING: Severity.LOW,
    ComplaintCategory.POWER_OUTAGE: Severity.HIGH,
    ComplaintCategory.MOSQUITO_BREEDING: Severity.MEDIUM,
    ComplaintCategory.MANHOLE_OPEN: Severity.HIGH,
    ComplaintCategory.OTHER: Severity.MEDIUM,
    ComplaintCategory.NOT_A_COMPLAINT: Severity.LOW,
})


def department_for_category(category: ComplaintCategory) -> Department:
    """Responsible department for a category (OTHER when unmapped)."""
    return CATEGORY_DEPARTMENT.get(category, Department.OTHER)


def default_severity_for_category(category: ComplaintCategory) -> Severity:
    """
    Default severity for a category.

    Only a fallback for callers that need a severity without a model
    verdict; it never overrides the severity the provider assigned.
    """
    return CATEGORY_DEFAULT_SEVERITY.get(category, Severity.MEDIUM)


def normalize_member(raw: Any, enum_cls: type[E], default: E) -> E:
    """
    Map a provider-supplied value onto a taxonomy member.

    Resolution order: enum key ("ROAD_DAMAGE"), then display value
    ("Road Damage/Potholes"), then ``default``. Non-string input and
    unknown strings both resolve to the default.

    Args:
        raw: Value taken from the provider's JSON
        enum_cls: Taxonomy enum to resolve against
        default: Member returned when nothing matches

    Returns:
        A member of ``enum_cls``
    """
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        return default

    candidate = raw.strip()
    if candidate in enum_cls.__members__:
        return enum_cls[candidate]
    for member in enum_cls:
        if member.value == candidate:
            return member
    return default


def is_member(value: Any, enum_cls: type[Enum]) -> bool:
    """True when ``value`` is a member, a key or a display value of ``enum_cls``."""
    if isinstance(value, enum_cls):
        return True
    if not isinstance(value, str):
        return False
    return value in enum_cls.__members__ or any(m.value == value for m in enum_cls)


def taxonomy_pairs(enum_cls: type[Enum]) -> list[tuple[str, str]]:
    """(display value, key) pairs in declaration order, for prompt rendering."""
    return [(member.value, member.name) for member in enum_cls]
