"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-mapper.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-json-mapper.
# Replace every <REQUIRED> placeholder before running check-config or convert.

codec:
  # Deepest nesting level the codec descends into (positive integer).
  max_levels: 256

types:
  # Keys are importable class names (package.module.ClassName).
  "<REQUIRED>":
    # Omit for no-argument construction, use "document" to pass the whole JSON
    # mapping, or list path expressions such as ["id", "owner.name", "tags[0]"].
    # constructor: document
    properties:
      # Shorthand: property name followed by a primitive type
      # (int, float, string, boolean, dateTime).
      id:
        type: int
        required: true
      # name: string
      # tags:
      #   type: {array: string}
      # owner:
      #   type: {class: package.module.Owner}
      # meta:
      #   type: {object: {created: dateTime}}
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
