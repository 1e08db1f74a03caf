"""
Enumerations for the complaint classification taxonomy.

All enums are closed taxonomies - no values outside these sets are permitted.
Each member carries a stable key (``member.name``, what the model is asked to
answer with) and a display value (``member.value``, what gets stored and shown).
"""

from enum import Enum


class ComplaintCategory(str, Enum):
    """
    Civic issue categories for Indian local governance.

    NOT_A_COMPLAINT is reserved for submissions that do not describe a civic
    issue at all (gibberish, selfies, food photos). OTHER is a genuine
    complaint that fits no specific category.
    """

    WATER_LOGGING = "Water Logging/Flooding"
    WATER_SHORTAGE = "Water Shortage/No Supply"
    GARBAGE_COLLECTION = "Garbage Collection Issue"
    GARBAGE_DUMPING = "Illegal Garbage Dumping"
    ROAD_DAMAGE = "Road Damage/Potholes"
    ROAD_CONSTRUCTION = "Road Construction Issue"
    STREET_LIGHT = "Street Light Not Working"
    DRAINAGE_BLOCKAGE = "Drainage Blockage/Overflow"
    SEWAGE_OVERFLOW = "Sewage Overflow"
    ILLEGAL_CONSTRUCTION = "Illegal Construction"
    ENCROACHMENT = "Encroachment on Public Property"
    NOISE_POLLUTION = "Noise Pollution"
    AIR_POLLUTION = "Air Pollution"
    STRAY_ANIMALS = "Stray Animals Issue"
    TREE_FALLEN = "Fallen Tree/Branch"
    PARK_MAINTENANCE = "Park Maintenance Issue"
    PUBLIC_TOILET = "Public Toilet Issue"
    TRAFFIC_SIGNAL = "Traffic Signal Not Working"
    TRAFFIC_CONGESTION = "Traffic Congestion"
    ILLEGAL_PARKING = "Illegal Parking"
    POWER_OUTAGE = "Power Outage"
    MOSQUITO_BREEDING = "Mosquito Breeding/Fogging Required"
    MANHOLE_OPEN = "Open Manhole/Safety Hazard"
    OTHER = "Other"
    NOT_A_COMPLAINT = "Not a Complaint"


class Severity(str, Enum):
    """
    Complaint severity, used for prioritising work.

    Declared from low to high.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Department(str, Enum):
    """Local government departments responsible for civic issues."""

    WATER_SUPPLY = "Water Supply Department"
    SANITATION = "Sanitation and Waste Management"
    PUBLIC_WORKS = "Public Works Department (PWD)"
    ELECTRICITY = "Electricity and Street Lights"
    DRAINAGE = "Drainage and Sewage Department"
    PARKS_GARDENS = "Parks and Gardens Department"
    HEALTH_HYGIENE = "Health and Hygiene Department"
    TRAFFIC_TRANSPORT = "Traffic and Transport Department"
    BUILDING_CONSTRUCTION = "Building and Construction Department"
    MUNICIPAL_CORPORATION = "Municipal Corporation Office"
    REVENUE = "Revenue Department"
    OTHER = "Other Department"
