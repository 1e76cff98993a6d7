from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np

from pyseam.core.material_types import MaterialType, parameter_names_for


@dataclass
class MaterialRecord:
    """
    One subsystem's material definition from a material file.

    A record is created from a header line (subsystem id and material type)
    and populated from the properties line that follows it. The material type
    is stored exactly as written; the meaning of each value in ``properties``
    depends on it (see ``parameter_names``).
    """
    subsystem_id: str
    material_type: str = ""
    properties: List[float] = field(default_factory=list)

    @property
    def is_known_type(self) -> bool:
        """Whether the material type is part of the documented vocabulary."""
        return MaterialType.lookup(self.material_type) is not None

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        return parameter_names_for(self.material_type)

    def named_parameters(self) -> Dict[str, float]:
        """
        Map parameter names to the values present in ``properties``.

        Values beyond the documented layout, or all values of an unknown
        type, are keyed by position as MP1, MP2, ...
        """
        names = self.parameter_names
        named = {}
        for index, value in enumerate(self.properties):
            key = names[index] if index < len(names) else f"MP{index + 1}"
            named[key] = value
        return named

    def as_array(self) -> np.ndarray:
        """Return the properties as a float64 numpy array."""
        return np.asarray(self.properties, dtype=np.float64)

    def __str__(self) -> str:
        values = " ".join(f"{value:g}" for value in self.properties)
        return f"Subsystem ID: {self.subsystem_id}\nType: {self.material_type}\nProperties: {values}"
