"""
JSON-backed storage for the resource list.

Only load() and save() touch the filesystem. The list transforms take a
tuple of resources and return a new one, leaving their input untouched.
"""

import json
import logging
from pathlib import Path

from django.core.exceptions import ValidationError

from resources.dataclasses import Resource
from resources.validators import parse_resources

logger = logging.getLogger(__name__)


def load(path) -> tuple[Resource, ...]:
    """
    Load resources from the JSON file at path.

    A missing file is an empty list. Raises ValidationError when the file
    is not valid JSON or does not hold a list of resources.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No resources file at {path}, starting empty")
        return ()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Resources file {path} is not valid JSON: {e}")
        raise ValidationError(f"{path} is not valid JSON: {e}")

    result = parse_resources(data)
    if not result.ok:
        logger.error(f"Resources file {path} is invalid: {result.error}")
        raise ValidationError(f"{path}: {result.error}")

    logger.info(f"Loaded {len(result.resources)} resources from {path}")
    return result.resources


def save(path, resources) -> None:
    """Overwrite the file at path with resources as indented JSON."""
    path = Path(path)
    content = json.dumps(
        [resource.to_dict() for resource in resources], indent=2, ensure_ascii=False
    )
    path.write_text(content, encoding="utf-8")
    logger.info(f"Saved {len(resources)} resources to {path}")


def add(resources, resource) -> tuple[Resource, ...]:
    return (*resources, resource)


def remove_at(resources, index) -> tuple[Resource, ...]:
    # Callers check the index with is_valid_index first.
    return (*resources[:index], *resources[index + 1 :])


def replace_at(resources, index, resource) -> tuple[Resource, ...]:
    return tuple(
        resource if i == index else existing for i, existing in enumerate(resources)
    )


def is_valid_index(resources, index) -> bool:
    return 0 <= index < len(resources)
