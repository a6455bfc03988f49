"""Load record snapshots exported from the record store."""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ErrorCode, SnapshotError
from .models.records import RecordSnapshot

logger = logging.getLogger(__name__)


def parse_snapshot(data: dict) -> RecordSnapshot:
    """
    Validate raw snapshot data.

    Raises:
        SnapshotError: If the data does not match the record models
    """
    try:
        return RecordSnapshot.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(x) for x in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise SnapshotError(
            f"Invalid snapshot: {e.error_count()} validation error(s)",
            details={"errors": errors},
        ) from e


def load_snapshot(path: Union[str, Path]) -> RecordSnapshot:
    """
    Read a JSON snapshot file.

    Args:
        path: Path to a JSON object with ``sets``, ``activities``,
            ``body_metrics``, ``exercises``, ``goals`` and ``goal_logs`` lists

    Returns:
        RecordSnapshot

    Raises:
        SnapshotError: If the file is missing, not JSON, or invalid
    """
    path = Path(path)
    if not path.exists():
        raise SnapshotError(
            f"Snapshot file not found: {path}",
            code=ErrorCode.SNAPSHOT_NOT_FOUND,
            details={"path": str(path)},
        )

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SnapshotError(
            f"Snapshot is not valid JSON: {e.msg}",
            details={"path": str(path), "line": e.lineno},
        ) from e

    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object", details={"path": str(path)})

    snapshot = parse_snapshot(data)
    logger.info(
        "Loaded snapshot %s: %d sets, %d activities, %d body metrics",
        path, len(snapshot.sets), len(snapshot.activities), len(snapshot.body_metrics),
    )
    return snapshot
