import logging
import sys
from pathlib import Path
from typing import Dict, List, Mapping, Optional, TextIO, Union

import pandas as pd
from ruamel.yaml import YAML

from pyseam.core.records import MaterialRecord
from pyseam.data.constants import FileConstants

logger = logging.getLogger(__name__)

SUBSYSTEM_ID_COLUMN = "subsystem_id"
MATERIAL_TYPE_COLUMN = "material_type"


def sorted_records(materials: Mapping[str, MaterialRecord]) -> List[MaterialRecord]:
    """Records in subsystem id order, the stable order used by every export."""
    return [materials[key] for key in sorted(materials)]


def format_materials(materials: Mapping[str, MaterialRecord]) -> str:
    """Render every record's id, type and properties as a text block."""
    return "\n\n".join(str(record) for record in sorted_records(materials))


def display_materials(materials: Mapping[str, MaterialRecord], stream: Optional[TextIO] = None) -> None:
    """Write the rendered records to ``stream`` (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    text = format_materials(materials)
    if text:
        stream.write(text + "\n")


def materials_to_dataframe(materials: Mapping[str, MaterialRecord]) -> pd.DataFrame:
    """
    Tabulate records as a DataFrame.

    One row per record, with ``subsystem_id`` and ``material_type`` columns
    followed by MP1..MPn; missing parameters are NaN.
    """
    records = sorted_records(materials)
    width = max((len(record.properties) for record in records), default=0)
    parameter_columns = [f"MP{i + 1}" for i in range(width)]
    rows = []
    for record in records:
        row = {SUBSYSTEM_ID_COLUMN: record.subsystem_id, MATERIAL_TYPE_COLUMN: record.material_type}
        row.update(zip(parameter_columns, record.properties))
        rows.append(row)
    df = pd.DataFrame(rows, columns=[SUBSYSTEM_ID_COLUMN, MATERIAL_TYPE_COLUMN, *parameter_columns])
    logger.debug("Tabulated %d material records with %d parameter columns", len(df), width)
    return df


def _as_yaml_data(materials: Mapping[str, MaterialRecord]) -> Dict[str, Dict]:
    data = {}
    for record in sorted_records(materials):
        data[record.subsystem_id] = {
            MATERIAL_TYPE_COLUMN: record.material_type,
            "properties": [float(value) for value in record.properties],
        }
        if record.is_known_type:
            data[record.subsystem_id]["parameters"] = record.named_parameters()
    return data


def write_materials_yaml(materials: Mapping[str, MaterialRecord], output_path: Union[str, Path]) -> Path:
    """
    Write records to a YAML file keyed by subsystem id.
    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    yaml = YAML(typ='safe')
    yaml.default_flow_style = False
    with open(output_path, 'w', encoding=FileConstants.DEFAULT_ENCODING) as f:
        yaml.dump(_as_yaml_data(materials), f)
    logger.info("Wrote %d material records to %s", len(materials), output_path)
    return output_path
