"""Material type vocabulary of the SEAM material file and its parameter layout."""
from enum import Enum
from typing import Dict, Optional, Tuple


class MaterialType(Enum):
    """Material types documented for the material file."""
    ISOELASTIC = "ISOELASTIC"  # linear, temperature-independent isotropic materials
    GAS = "GAS"
    LIQUID = "LIQUID"
    SOLIDWAVE = "SOLIDWAVE"  # isotropic materials with known longitudinal and shear wavespeeds
    FIBER = "FIBER"  # porous absorbers
    FIBERZ = "FIBERZ"  # porous materials with known characteristic impedance and propagation constant

    @classmethod
    def lookup(cls, name: str) -> Optional['MaterialType']:
        """Return the member matching ``name`` (case-insensitive), or None."""
        try:
            return cls(name.strip().upper())
        except ValueError:
            return None


# MP1..MP6 meaning per material type. Optional trailing parameters are included.
PARAMETER_NAMES: Dict[MaterialType, Tuple[str, ...]] = {
    MaterialType.ISOELASTIC: ("RHO", "E", "G", "NU", "ETA", "DAMP_EXP"),
    MaterialType.GAS: ("RHO", "C", "ETA", "ALPHA", "DAMP_EXP", "ABS_EXP"),
    MaterialType.LIQUID: ("RHO", "C", "ETA", "ALPHA", "DAMP_EXP", "ABS_EXP"),
    MaterialType.SOLIDWAVE: ("RHO", "C_LONG", "C_SHEAR", "ETA", "DAMP_EXP"),
    MaterialType.FIBER: ("RHO", "FIB_TYPE", "RHO_GAS", "C_GAS", "R_FLOW", "D"),
    MaterialType.FIBERZ: ("RHO", "RE_Z", "NEG_IM_Z", "RE_B_OMEGA", "IM_B_OMEGA"),
}


def parameter_names_for(material_type: str) -> Tuple[str, ...]:
    """Parameter names for a material type string; empty for unknown types."""
    member = MaterialType.lookup(material_type)
    if member is None:
        return ()
    return PARAMETER_NAMES[member]
