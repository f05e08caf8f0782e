"""Adaptation records and the metrics analysis that produces them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from workout_engine.models.enums import (
    AdaptationReason,
    ChangeType,
    Intensity,
    Severity,
)


@dataclass(frozen=True)
class AdaptationChange:
    """One typed mutation instruction.

    ``description``, ``original_value`` and ``new_value`` are for display.
    The applier only reads the structured targets: ``target_intensity``
    for intensity reductions (None = one level easier) and
    ``target_duration_min`` for duration reductions.
    """

    change_type: ChangeType
    description: str
    original_value: str = ""
    new_value: str = ""
    target_intensity: Intensity | None = None
    target_duration_min: int | None = None


@dataclass(frozen=True)
class Adaptation:
    """A recorded decision to alter a plan."""

    id: str
    reason: AdaptationReason
    changes: tuple[AdaptationChange, ...]
    applied_at: datetime = field(default_factory=datetime.now)
    duration_days: int | None = None  # None = one-shot

    def __post_init__(self) -> None:
        if not self.changes:
            raise ValueError(f"Adaptation {self.id!r} must carry at least one change")


@dataclass(frozen=True)
class MetricFinding:
    """Record of a single threshold rule firing during analysis."""

    rule_id: str
    reason: AdaptationReason
    severity: Severity
    metric_value: float
    explanation: str = ""


@dataclass(frozen=True)
class MetricsAnalysis:
    """Outcome of MetricsAnalyzer.analyze().

    ``reasons`` follows AdaptationReason declaration order; ``severity`` is
    the maximum over all findings (LOW when nothing fired).
    """

    findings: tuple[MetricFinding, ...] = field(default_factory=tuple)
    severity: Severity = Severity.LOW

    @property
    def reasons(self) -> tuple[AdaptationReason, ...]:
        return tuple(f.reason for f in self.findings)

    @property
    def needs_adaptation(self) -> bool:
        return len(self.findings) > 0
