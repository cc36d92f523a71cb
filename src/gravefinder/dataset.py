"""Loading of the bundled burial dataset (a GeoJSON FeatureCollection).

Only local files are read. Every feature with a properties mapping becomes a
record, named or not; search pools drop unnamed graves, section browsing keeps
them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from gravefinder.exceptions import DatasetError
from gravefinder.records import BurialRecord

logger = logging.getLogger(__name__)


def _point(geometry: Any) -> Optional[Tuple[float, float]]:
    if not isinstance(geometry, Mapping) or geometry.get("type") != "Point":
        return None
    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        return None
    try:
        return float(coords[0]), float(coords[1])
    except (TypeError, ValueError):
        return None


def records_from_feature_collection(data: Mapping[str, Any]) -> List[BurialRecord]:
    """Convert a parsed FeatureCollection into burial records, in feature order."""
    if not isinstance(data, Mapping) or data.get("type") != "FeatureCollection":
        raise DatasetError("Burial dataset must be a GeoJSON FeatureCollection")
    features = data.get("features")
    if not isinstance(features, list):
        raise DatasetError("Burial dataset has no 'features' list")

    records: List[BurialRecord] = []
    skipped = 0
    for feature in features:
        props = feature.get("properties") if isinstance(feature, Mapping) else None
        if not isinstance(props, Mapping):
            skipped += 1
            continue
        records.append(
            BurialRecord.from_properties(props, coordinates=_point(feature.get("geometry")))
        )
    if skipped:
        logger.debug("Skipped %d malformed features", skipped)
    return records


def load_burials(path: Union[str, Path]) -> List[BurialRecord]:
    """Read burial records from a GeoJSON file on disk.

    Raises `DatasetError` if the file is missing, unreadable, or not a
    FeatureCollection.
    """
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DatasetError(f"Burial dataset not found: {file_path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetError(f"Cannot read burial dataset {file_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Burial dataset {file_path} is not valid JSON: {exc}") from exc

    records = records_from_feature_collection(data)
    logger.info("Loaded %d burial records from %s", len(records), file_path)
    return records
