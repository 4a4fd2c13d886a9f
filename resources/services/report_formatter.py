"""
README formatting for the resource list.

Formats the current resources into the plain text document that sits next to
the resources file.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TITLE = "Link list (Not ordered/No context)"
MANAGING_HEADER = "## Managing resources"
MANAGING_INSTRUCTIONS = (
    "Run `python manage.py manage_resources` to modify this list."
)


def render_report(resources) -> str:
    """
    Render the README text for resources.

    The output depends only on resources and always ends with a newline.
    """
    output = [TITLE, ""]
    output.extend(resource.display_line() for resource in resources)
    output.extend(["", MANAGING_HEADER, "", MANAGING_INSTRUCTIONS, ""])
    return "\n".join(output)


def write_report(path, resources) -> None:
    """Overwrite the README at path with the rendered report."""
    Path(path).write_text(render_report(resources), encoding="utf-8")
    logger.info(f"Wrote README for {len(resources)} resources to {path}")
