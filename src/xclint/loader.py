"""Load serialized target descriptions."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .models import Target

logger = logging.getLogger(__name__)


def load_target(target_path: str | Path) -> Target:
    """Load a target description from a JSON file.

    Args:
        target_path: JSON file with camelCase keys, as written by
                     ``Target.model_dump(mode="json", by_alias=True)``

    Returns:
        Target: Validated target model

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or not a valid target
    """
    target_path = Path(target_path)
    if not target_path.exists():
        raise FileNotFoundError(f"Target file not found: {target_path}")

    logger.debug(f"Loading target from {target_path}")

    try:
        with open(target_path, encoding="utf-8") as f:
            data = json.load(f)
        return Target.model_validate(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in target file {target_path}: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid target description in {target_path}: {e}")
