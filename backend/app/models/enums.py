"""
Resource type enumeration.

Names the driver-owned resources the ownership guard can check.
"""

import enum


class ResourceType(str, enum.Enum):
    """
    Driver-owned resource types.

    Daily logs are owned through their vehicle, so they are checked as VEHICLE.
    """
    VEHICLE = "VEHICLE"
    FIXED_COST = "FIXED_COST"
