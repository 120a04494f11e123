from __future__ import annotations

from dataclasses import dataclass, field

from services.wellbore_geometry_service.core.models.enums import Severity

WHOLE_WELLBORE_SUBJECT_ID = "-"
WHOLE_WELLBORE_SUBJECT_NAME = "General"


@dataclass(frozen=True, slots=True)
class ValidationFinding:
    subject_id: str
    subject_name: str
    message: str
    severity: Severity

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR


@dataclass(slots=True)
class ValidationResult:
    """
    Ordered findings of one validation pass. Errors block the host from saving,
    warnings need an explicit confirmation.
    """

    findings: list[ValidationFinding] = field(default_factory=list)

    @property
    def has_critical_errors(self) -> bool:
        return any(f.severity == Severity.ERROR for f in self.findings)

    @property
    def has_warnings(self) -> bool:
        return any(f.severity == Severity.WARNING for f in self.findings)

    @property
    def is_valid(self) -> bool:
        return not self.has_critical_errors

    @property
    def errors(self) -> tuple[ValidationFinding, ...]:
        return tuple(f for f in self.findings if f.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[ValidationFinding, ...]:
        return tuple(f for f in self.findings if f.severity == Severity.WARNING)

    def error(self, subject_id: str, subject_name: str, message: str) -> None:
        self.findings.append(
            ValidationFinding(subject_id, subject_name, message, Severity.ERROR)
        )

    def warning(self, subject_id: str, subject_name: str, message: str) -> None:
        self.findings.append(
            ValidationFinding(subject_id, subject_name, message, Severity.WARNING)
        )

    def extend(self, other: ValidationResult) -> ValidationResult:
        self.findings.extend(other.findings)
        return self
