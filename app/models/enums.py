"""
Enumerations shared by models, schemas and the analytics layer.

Columns store the plain string value; ``str`` enums compare equal to it.
"""

from enum import Enum


class BodyPart(str, Enum):
    """Body part an exercise primarily targets."""
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CHEST = "chest"
    BACK = "back"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    SHOULDERS = "shoulders"
    CALVES = "calves"
    CORE = "core"
    FOREARMS = "forearms"
    NECK = "neck"
    ADDUCTORS = "adductors"
    ABDUCTORS = "abductors"


class MuscleGroup(str, Enum):
    """Coarse bucket used for the muscle-group balance chart."""
    UPPER = "upper"
    LOWER = "lower"
    LEGS = "legs"
    CARDIO = "cardio"
    OTHER = "other"


class WorkoutType(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    LEGS = "legs"
    CARDIO = "cardio"


class Side(str, Enum):
    """Side a unilateral set was performed on."""
    LEFT = "left"
    RIGHT = "right"


class GoalType(str, Enum):
    VOLUME = "volume"
    FREQUENCY = "frequency"
    SPECIFIC_EXERCISES = "specific_exercises"


class GoalTimeframe(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class Severity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class PhaseType(str, Enum):
    """Training phase a week is classified into."""
    ACCUMULATION = "accumulation"
    INTENSIFICATION = "intensification"
    DELOAD = "deload"
    TRANSITION = "transition"


# Antagonist pairs checked by the imbalance detectors.
ANTAGONIST_PAIRS: list[tuple[BodyPart, BodyPart]] = [
    (BodyPart.CHEST, BodyPart.BACK),
    (BodyPart.QUADS, BodyPart.HAMSTRINGS),
    (BodyPart.BICEPS, BodyPart.TRICEPS),
    (BodyPart.ADDUCTORS, BodyPart.ABDUCTORS),
]

# Small stabilising muscles that programs tend to skip.
STABILIZER_BODY_PARTS: list[BodyPart] = [
    BodyPart.CORE,
    BodyPart.FOREARMS,
    BodyPart.CALVES,
    BodyPart.NECK,
    BodyPart.ADDUCTORS,
    BodyPart.ABDUCTORS,
]

BODY_PART_LABELS: dict[str, str] = {
    BodyPart.QUADS.value: "Quadriceps",
    BodyPart.HAMSTRINGS.value: "Hamstrings",
    BodyPart.GLUTES.value: "Glutes",
    BodyPart.CHEST.value: "Chest",
    BodyPart.BACK.value: "Back",
    BodyPart.BICEPS.value: "Biceps",
    BodyPart.TRICEPS.value: "Triceps",
    BodyPart.SHOULDERS.value: "Shoulders",
    BodyPart.CALVES.value: "Calves",
    BodyPart.CORE.value: "Core",
    BodyPart.FOREARMS.value: "Forearms",
    BodyPart.NECK.value: "Neck",
    BodyPart.ADDUCTORS.value: "Adductors",
    BodyPart.ABDUCTORS.value: "Abductors",
}


def body_part_label(part: str) -> str:
    return BODY_PART_LABELS.get(part, part)
