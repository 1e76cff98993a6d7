"""Display and export of parsed material records."""

from .material_exporter import (
    sorted_records,
    format_materials,
    display_materials,
    materials_to_dataframe,
    write_materials_yaml
)

__all__ = [
    "sorted_records",
    "format_materials",
    "display_materials",
    "materials_to_dataframe",
    "write_materials_yaml"
]
