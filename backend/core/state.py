# backend/core/state.py

from enum import Enum


class AssistantStrategyName(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class ConnectorStyle(str, Enum):
    CIRCUIT = "circuit"
    CURVE = "curve"


class SkillCategory(str, Enum):
    LANGUAGE = "language"
    FRAMEWORK = "framework"
    CLOUD = "cloud"
    DATABASE = "database"
    SPECIALTY = "specialty"
