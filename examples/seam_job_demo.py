"""Demonstration script for resolving a job manifest and reading its material file."""
import logging
import sys
from pathlib import Path

from pyseam.core.exceptions import ManifestError
from pyseam.data import SAMPLES_DIR, ManifestConstants
from pyseam.parsing.api import load_job, load_settings
from pyseam.parsing.io.material_exporter import display_materials, materials_to_dataframe


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_job(manifest_path: Path, settings_path: Path) -> int:
    """Resolve the manifest, print the role paths and the parsed materials."""
    setup_logging()
    settings = load_settings(settings_path)
    try:
        job = load_job(manifest_path, settings)
    except ManifestError as e:
        print(e, file=sys.stderr)
        return 1
    print(f"\n{'=' * 80}")
    print(job.paths.summary())
    for diagnostic in job.paths.diagnostics:
        print(f"Error: {diagnostic}", file=sys.stderr)
    print(f"\n{'=' * 80}")
    display_materials(job.materials)
    print(f"\n{'=' * 80}")
    print(materials_to_dataframe(job.materials).to_string(index=False))
    for warning in job.warnings:
        print(f"Warning: {warning}")
    return 0


if __name__ == "__main__":
    manifest = Path(sys.argv[1]) if len(sys.argv) > 1 else SAMPLES_DIR / ManifestConstants.DEFAULT_MANIFEST_NAME
    settings_file = Path(sys.argv[2]) if len(sys.argv) > 2 else SAMPLES_DIR / "settings.yaml"
    sys.exit(demonstrate_job(manifest, settings_file))
