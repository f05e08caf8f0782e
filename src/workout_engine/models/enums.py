"""Enumerations and tuning constants for the workout engine.

String-valued enums carry the tags exchanged with the app layer
(``"low_readiness"``, ``"cardio"`` ...); ordered enums use IntEnum so
that ``max()`` and comparisons work directly.
"""

from enum import Enum, IntEnum


class Severity(IntEnum):
    """Escalation level of a metrics analysis; higher value is more urgent."""

    LOW = 1
    MODERATE = 2
    HIGH = 3


class AdaptationReason(str, Enum):
    """Why a plan was adapted. Declaration order is the reporting order."""

    LOW_READINESS = "low_readiness"
    POOR_SLEEP = "poor_sleep"
    HIGH_STRESS = "high_stress"
    OVERTRAINING = "overtraining"
    INJURY = "injury"
    ILLNESS = "illness"
    EQUIPMENT_UNAVAILABLE = "equipment_unavailable"
    TIME_CONSTRAINT = "time_constraint"


class ChangeType(str, Enum):
    """Concrete mutation an adaptation applies to a plan."""

    INTENSITY_REDUCTION = "intensity_reduction"
    DURATION_REDUCTION = "duration_reduction"
    EXERCISE_SUBSTITUTION = "exercise_substitution"
    REST_DAY = "rest_day"


class Intensity(str, Enum):
    """Daily workout intensity, easiest first."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    def step_down(self) -> "Intensity":
        """Return the next easier intensity (LOW stays LOW)."""
        order = list(Intensity)
        return order[max(order.index(self) - 1, 0)]


class ExerciseCategory(str, Enum):
    CARDIO = "cardio"
    HIIT = "hiit"
    STRENGTH = "strength"
    YOGA = "yoga"
    FLEXIBILITY = "flexibility"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Equipment(str, Enum):
    NONE = "none"
    DUMBBELLS = "dumbbells"
    RESISTANCE_BANDS = "resistance_bands"
    KETTLEBELL = "kettlebell"
    BARBELL = "barbell"
    GYM_ACCESS = "gym_access"
    YOGA_MAT = "yoga_mat"
    PULL_UP_BAR = "pull_up_bar"
    TREADMILL = "treadmill"
    STATIONARY_BIKE = "stationary_bike"


class MuscleGroup(str, Enum):
    FULL_BODY = "full_body"
    CHEST = "chest"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    BACK = "back"
    CORE = "core"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"


class ModificationType(str, Enum):
    EASIER = "easier"
    HARDER = "harder"
    INJURY_ADAPTATION = "injury_adaptation"


class WorkoutGoal(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    GENERAL_FITNESS = "general_fitness"


class GoalType(str, Enum):
    CALORIES_BURNED = "calories_burned"
    WEEKLY_WORKOUTS = "weekly_workouts"


class RecommendationPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Scenario(str, Enum):
    """Chat-triggered recommendation overrides."""

    BACK_PAIN = "back_pain"
    FATIGUE = "fatigue"
    HIGH_ENERGY = "high_energy"


# ---------------------------------------------------------------------------
# Readiness score weights (sum to 1.0)
# ---------------------------------------------------------------------------
READINESS_WEIGHT_RECOVERY = 0.30
READINESS_WEIGHT_SLEEP = 0.25
READINESS_WEIGHT_STRESS = 0.20
READINESS_WEIGHT_HRV = 0.15
READINESS_WEIGHT_ACTIVITY = 0.10

# Stress (1-10) inverts to 100 - stress * 10; HRV scales x2, capped at 100
STRESS_NORMALIZATION_FACTOR = 10
HRV_NORMALIZATION_FACTOR = 2
NORMALIZED_MAX = 100

# ---------------------------------------------------------------------------
# Metric analysis thresholds: "high" fires below/at the first bound,
# "moderate" fires between the two bounds.
# ---------------------------------------------------------------------------
RECOVERY_HIGH_THRESHOLD = 40    # recovery < 40 → HIGH
RECOVERY_MODERATE_THRESHOLD = 60  # 40 <= recovery < 60 → MODERATE
SLEEP_HIGH_THRESHOLD = 50
SLEEP_MODERATE_THRESHOLD = 70
STRESS_HIGH_THRESHOLD = 8       # stress >= 8 → HIGH
STRESS_MODERATE_THRESHOLD = 6   # 6 <= stress < 8 → MODERATE
HRV_HIGH_THRESHOLD = 20
HRV_MODERATE_THRESHOLD = 30

# ---------------------------------------------------------------------------
# Valid metric ranges (inclusive)
# ---------------------------------------------------------------------------
SCORE_RANGE = (0.0, 100.0)
STRESS_RANGE = (1.0, 10.0)

# ---------------------------------------------------------------------------
# Adaptation constants
# ---------------------------------------------------------------------------
SHORT_SESSION_TARGET_MIN = 20     # poor sleep, HIGH severity
MODERATE_SESSION_TARGET_MIN = 30  # poor sleep, MODERATE severity
BASELINE_SESSION_MIN = 45
SHORT_SESSION_REDUCTION_FACTOR = 0.5
DEFAULT_REDUCTION_FACTOR = 0.75
ILLNESS_ADAPTATION_DAYS = 7
REST_DAY_NOTE = "Rest day recommended based on health metrics"

# ---------------------------------------------------------------------------
# Plan generation constants
# ---------------------------------------------------------------------------
WEIGHT_LOSS_WEEKLY_CALORIE_TARGET = 2000
MAX_SESSIONS_PER_WEEK = 7
GOAL_DEADLINE_DAYS = 7

# ---------------------------------------------------------------------------
# Session tracking constants
# ---------------------------------------------------------------------------
ACHIEVEMENT_WEEK_WARRIOR_SESSIONS = 5
ACHIEVEMENT_CALORIE_CRUSHER_KCAL = 1000
TRENDS_TIMEFRAME_DAYS = {"week": 7, "month": 30, "quarter": 90}
