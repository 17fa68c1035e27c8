"""Export bundle serialization and import validation.

The bundle is the JSON document the tracker app exports: a version tag, an
export timestamp and one array per record collection, all with camelCase keys.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import structlog
from pydantic import Field, SerializeAsAny, ValidationError, field_validator

from sleeptrack.config import settings
from sleeptrack.errors import DataImportError
from sleeptrack.models.base import TrackerModel
from sleeptrack.models.goals import Goal
from sleeptrack.models.insights import Insight, InsightType, Recommendation
from sleeptrack.models.records import MoodEnergyRecord, SleepRecord, WorkoutRecord

logger = structlog.get_logger()

_SLEEP_FIELDS = {
    "date": str,
    "bedtime": str,
    "wakeTime": str,
    "duration": (int, float),
    "efficiency": (int, float),
    "qualityScore": (int, float),
}
_WORKOUT_FIELDS = {
    "date": str,
    "type": str,
    "duration": (int, float),
    "intensity": str,
}

# bundle key -> label used in warnings
_COLLECTIONS = {
    "sleepRecords": "sleep records",
    "workoutRecords": "workout records",
    "moodEnergyRecords": "mood/energy records",
    "goals": "goals",
    "insights": "insights",
}


class ExportData(TrackerModel):
    """A full export bundle."""

    version: str = Field(default_factory=lambda: settings.data.export_version)
    export_date: datetime = Field(default_factory=datetime.now)
    sleep_records: list[SleepRecord] = Field(default_factory=list)
    workout_records: list[WorkoutRecord] = Field(default_factory=list)
    mood_energy_records: list[MoodEnergyRecord] = Field(default_factory=list)
    goals: list[Goal] = Field(default_factory=list)
    insights: list[SerializeAsAny[Insight]] = Field(default_factory=list)

    @field_validator("insights", mode="before")
    @classmethod
    def _parse_recommendations(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [
            Recommendation.model_validate(item)
            if isinstance(item, dict) and item.get("type") == InsightType.RECOMMENDATION.value
            else item
            for item in value
        ]


class ValidationResult(TrackerModel):
    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    data_counts: dict[str, int] = Field(
        default_factory=lambda: {key: 0 for key in _COLLECTIONS}
    )


def _has_shape(record: Any, fields: dict[str, type | tuple[type, ...]]) -> bool:
    if not isinstance(record, dict):
        return False
    for key, expected in fields.items():
        value = record.get(key)
        # bool is an int subclass but never a valid measurement
        if isinstance(value, bool) or not isinstance(value, expected):
            return False
    return True


def export_to_json(
    sleep_records: list[SleepRecord],
    workout_records: list[WorkoutRecord],
    mood_records: list[MoodEnergyRecord],
    goals: list[Goal],
    insights: list[Insight],
) -> str:
    """Serialize all collections into an indented camelCase bundle."""
    bundle = ExportData(
        sleep_records=sleep_records,
        workout_records=workout_records,
        mood_energy_records=mood_records,
        goals=goals,
        insights=insights,
    )
    return bundle.model_dump_json(by_alias=True, indent=2)


def validate_import(json_text: str) -> ValidationResult:
    """Check a bundle's structure without building models.

    Structural problems (bad JSON, missing version or export date) are errors.
    Incomplete records, missing collections and a version mismatch are only
    warnings; the bundle may still be imported.
    """
    result = ValidationResult()

    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        result.is_valid = False
        result.errors.append(f"Failed to parse JSON: {e}")
        return result

    if not isinstance(data, dict):
        result.is_valid = False
        result.errors.append("Export must be a JSON object")
        return result

    version = data.get("version")
    if not version or not isinstance(version, str):
        result.is_valid = False
        result.errors.append("Invalid or missing version information")

    export_date = data.get("exportDate")
    if not export_date or not isinstance(export_date, str):
        result.is_valid = False
        result.errors.append("Invalid or missing export date")

    for key, label in _COLLECTIONS.items():
        records = data.get(key)
        if not isinstance(records, list):
            result.warnings.append(f"No {label} found in export")
            continue
        result.data_counts[key] = len(records)

        if key == "sleepRecords":
            shape, kind = _SLEEP_FIELDS, "Sleep"
        elif key == "workoutRecords":
            shape, kind = _WORKOUT_FIELDS, "Workout"
        else:
            continue
        for index, record in enumerate(records):
            if not _has_shape(record, shape):
                result.warnings.append(f"{kind} record at index {index} may be incomplete or invalid")

    expected_version = settings.data.export_version
    if version != expected_version:
        result.warnings.append(
            f"Export version {version} differs from current app version {expected_version}"
        )

    for warning in result.warnings:
        logger.warning("Import validation warning", warning=warning)

    return result


def parse_import_data(json_text: str) -> ExportData:
    """Build an ExportData from bundle JSON.

    Missing collections become empty lists.

    Raises:
        DataImportError: If the JSON is malformed or any record fails validation.
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise DataImportError(f"Failed to parse JSON: {e}") from e

    if not isinstance(data, dict):
        raise DataImportError("Export must be a JSON object")

    try:
        bundle = ExportData.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise DataImportError(f"Export contains {len(errors)} invalid field(s)", errors) from e

    logger.debug(
        "Parsed export bundle",
        version=bundle.version,
        sleep_records=len(bundle.sleep_records),
        workout_records=len(bundle.workout_records),
    )
    return bundle


def load_bundle(path: Path | str | None = None) -> ExportData:
    """Read and parse a bundle file (defaults to the configured export file)."""
    path = Path(path or settings.data.export_file).expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DataImportError(f"Cannot read {path}: {e}") from e
    return parse_import_data(text)


def save_bundle(bundle: ExportData, path: Path | str | None = None) -> Path:
    """Write a bundle as camelCase JSON, creating parent directories."""
    path = Path(path or settings.data.export_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(bundle.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    logger.info("Saved export bundle", path=str(path))
    return path
