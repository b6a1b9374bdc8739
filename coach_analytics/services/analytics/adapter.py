"""
Record Normalizers - Coerce raw store rows into canonical records.

Raw rows come from two places with different encodings:
- Remote store rows (snake_case, tag lists often JSON-encoded strings)
- Local cache rows (camelCase, tag lists usually real arrays)

Normalizers never raise on bad data. Malformed fields degrade to safe
defaults; malformed records are skipped and reported back.
"""
import json
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

from coach_analytics.core.config import settings
from coach_analytics.core.logging import get_logger, log_skipped_records
from coach_analytics.models.record import (
    ExerciseDetails,
    LogEntry,
    SkillAssessment,
    SkillScore,
)
from coach_analytics.services.analytics.numeric import to_float

logger = get_logger(__name__)

T = TypeVar("T")

# Assessment types that carry no comparable skill scores
FIRST_TIME_TYPES = {"first_time", "first_time_assessment", "newbie", "experience"}
# skills_data keys written by the Q&A experience assessment
FIRST_TIME_PAYLOAD_KEYS = {"branching_assessment", "newbie_assessment"}


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not tags, keep the literal text instead
    raise ValueError(f"unsupported JSON constant {name}")


@dataclass(frozen=True)
class SkippedRecord:
    """A raw record that could not be normalized."""
    index: int
    reason: str


@dataclass
class NormalizationResult(Generic[T]):
    """Normalized records plus diagnostics about skipped rows."""
    records: List[T] = field(default_factory=list)
    skipped: List[SkippedRecord] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class RawRecordAdapter(ABC, Generic[T]):
    """Abstract base class for raw record normalizers."""

    record_kind: str = "record"

    def normalize(self, raw_records: Optional[Iterable[Any]]) -> NormalizationResult[T]:
        """
        Normalize a batch of raw records.

        Args:
            raw_records: Raw rows as delivered by the store (may be None)

        Returns:
            NormalizationResult with records in input order and skip diagnostics
        """
        result: NormalizationResult[T] = NormalizationResult()
        rows = list(raw_records or [])

        for idx, raw in enumerate(rows):
            try:
                if not isinstance(raw, Mapping):
                    raise TypeError(f"expected a mapping, got {type(raw).__name__}")
                result.records.append(self.normalize_record(raw))
            except (KeyError, ValueError, TypeError) as e:
                result.skipped.append(SkippedRecord(index=idx, reason=str(e)))

        log_skipped_records(logger, self.record_kind, result.skipped, len(rows))
        logger.debug(
            "Normalized records",
            record_kind=self.record_kind,
            normalized=len(result.records),
            skipped=result.skipped_count,
        )

        return result

    @abstractmethod
    def normalize_record(self, raw: Mapping[str, Any]) -> T:
        """
        Normalize a single raw row.

        Raises:
            KeyError, ValueError, TypeError: if the whole record is unusable
        """
        pass

    # ========================================
    # Shared field coercion
    # ========================================

    def _get(self, raw: Mapping[str, Any], *names: str) -> Any:
        """Return the first non-None value among alternative field names."""
        for name in names:
            value = raw.get(name)
            if value is not None:
                return value
        return None

    def _require_id(self, raw: Mapping[str, Any]) -> str:
        value = raw.get("id")
        if value is None or str(value).strip() == "":
            raise KeyError("missing required field 'id'")
        return str(value)

    def _coerce_tags(self, value: Any) -> tuple[str, ...]:
        """
        Coerce a tag field to a de-duplicated tuple.

        Accepts lists, JSON-encoded strings, bare scalars and None. A string
        that is not valid JSON is treated as a single tag.
        """
        if value is None:
            return ()

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return ()
            try:
                value = json.loads(text, parse_constant=_reject_constant)
            except ValueError:
                return (text,)
            if value is None:
                return ()

        if isinstance(value, (list, tuple, set, frozenset)):
            items = value
        else:
            items = [value]

        tags: Dict[str, None] = {}
        for item in items:
            if item is None or isinstance(item, (dict, list)):
                continue
            tag = str(item).strip()
            if tag:
                tags[tag] = None
        return tuple(tags)

    def _coerce_mapping(self, value: Any) -> Dict[str, Any]:
        """Coerce a mapping field that may arrive JSON-encoded."""
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                return {}
        if isinstance(value, Mapping):
            return dict(value)
        return {}

    def _parse_date(self, value: Any) -> date:
        """
        Parse a day-granular date.

        Raises:
            ValueError: if the value is not a recognizable date
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise ValueError(f"unsupported date value of type {type(value).__name__}")

        text = value.strip()
        if len(text) > 10:
            try:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            except ValueError:
                pass
        return date.fromisoformat(text[:10])

    def _parse_datetime(self, value: Any) -> datetime:
        """
        Parse a timestamp into a naive UTC datetime.

        Accepts datetimes, dates, ISO strings and epoch milliseconds.

        Raises:
            ValueError: if the value is not a recognizable timestamp
        """
        if isinstance(value, bool):
            raise ValueError("boolean is not a timestamp")
        if isinstance(value, (int, float)):
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        elif isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, str):
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        else:
            raise ValueError(f"unsupported timestamp value of type {type(value).__name__}")

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed


class LogEntryNormalizer(RawRecordAdapter[LogEntry]):
    """
    Normalizer for logbook entries.

    Required: ``id`` and ``date``. A date that is present but unparseable
    keeps the entry (``date=None``) so it still counts toward totals.
    """

    record_kind = "log_entry"

    def __init__(self, default_session_type: Optional[str] = None):
        self.default_session_type = default_session_type or settings.DEFAULT_SESSION_TYPE

    def normalize_record(self, raw: Mapping[str, Any]) -> LogEntry:
        entry_id = self._require_id(raw)

        raw_date = raw.get("date")
        if raw_date is None or (isinstance(raw_date, str) and not raw_date.strip()):
            raise KeyError("missing required field 'date'")

        try:
            entry_date: Optional[date] = self._parse_date(raw_date)
        except (ValueError, TypeError):
            logger.debug("Unparseable entry date", entry_id=entry_id)
            entry_date = None

        session_type = self._get(raw, "session_type", "sessionType")
        if session_type is None or not str(session_type).strip():
            session_type = self.default_session_type

        created_at = self._get(raw, "created_at", "createdAt")
        try:
            created = self._parse_datetime(created_at) if created_at is not None else None
        except (ValueError, TypeError, OverflowError, OSError):
            created = None

        notes = raw.get("notes")

        return LogEntry(
            id=entry_id,
            date=entry_date,
            hours=to_float(raw.get("hours")),
            feeling=int(to_float(raw.get("feeling"))),
            training_focus=self._coerce_tags(self._get(raw, "training_focus", "trainingFocus")),
            difficulty=self._coerce_tags(raw.get("difficulty")),
            session_type=str(session_type).strip(),
            exercise_details=self._extract_exercise(
                self._get(raw, "exercise_details", "exerciseDetails")
            ),
            notes=str(notes) if notes is not None else None,
            created_at=created,
        )

    def _extract_exercise(self, value: Any) -> Optional[ExerciseDetails]:
        details = self._coerce_mapping(value)
        if not details:
            return None

        return ExerciseDetails(
            exercise_name=self._get(details, "exercise_name", "exerciseName"),
            program_name=self._get(details, "program_name", "programName"),
            routine_name=self._get(details, "routine_name", "routineName"),
            target=details.get("target"),
            result=details.get("result"),
        )


class AssessmentNormalizer(RawRecordAdapter[SkillAssessment]):
    """
    Normalizer for coach assessment rows.

    Required: ``id`` and a parseable ``created_at`` (``assessment_date``
    is accepted as a fallback).
    """

    record_kind = "assessment"

    def normalize_record(self, raw: Mapping[str, Any]) -> SkillAssessment:
        assessment_id = self._require_id(raw)

        created_at = self._get(raw, "created_at", "createdAt", "assessment_date")
        if created_at is None:
            raise KeyError("missing required field 'created_at'")
        try:
            created = self._parse_datetime(created_at)
        except (OverflowError, OSError) as e:
            raise ValueError(f"invalid created_at: {e}")

        skills_data = self._coerce_mapping(self._get(raw, "skills_data", "skillsData"))
        assessment_type = self._get(raw, "type", "assessment_type", "assessmentType")

        return SkillAssessment(
            id=assessment_id,
            created_at=created,
            skills=self._extract_skills(skills_data),
            assessment_type=str(assessment_type) if assessment_type is not None else None,
            is_first_time=self._is_first_time(assessment_type, skills_data),
        )

    def _extract_skills(self, skills_data: Dict[str, Any]) -> Dict[str, SkillScore]:
        """Keep only skill entries that carry a numeric total."""
        skills: Dict[str, SkillScore] = {}

        for skill_id, payload in skills_data.items():
            if isinstance(payload, Mapping):
                total = self._optional_float(payload.get("total"))
            else:
                total = self._optional_float(payload)

            if total is None:
                continue
            skills[str(skill_id)] = SkillScore(total=total)

        return skills

    def _is_first_time(self, assessment_type: Any, skills_data: Dict[str, Any]) -> bool:
        if assessment_type is not None and str(assessment_type).lower() in FIRST_TIME_TYPES:
            return True
        return any(key in skills_data for key in FIRST_TIME_PAYLOAD_KEYS)

    def _optional_float(self, value: Any) -> Optional[float]:
        if value is None or isinstance(value, (bool, dict, list)):
            return None
        result = to_float(value, default=math.nan)
        return None if math.isnan(result) else result


def normalize_log_entries(raw_entries: Optional[Iterable[Any]]) -> NormalizationResult[LogEntry]:
    """Normalize raw logbook rows with default settings."""
    return LogEntryNormalizer().normalize(raw_entries)


def normalize_assessments(
    raw_assessments: Optional[Iterable[Any]],
) -> NormalizationResult[SkillAssessment]:
    """Normalize raw assessment rows."""
    return AssessmentNormalizer().normalize(raw_assessments)
