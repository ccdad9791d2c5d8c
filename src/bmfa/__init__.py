"""Top-level package for bmfa, the bitmap font atlas container format.

Provides subpackages:
- bmfa.core – data models, errors, metadata schema and serialization
- bmfa.imaging – origin normalizer and PNG codec
- bmfa.builder – atlas assembly from decoded parts
- bmfa.container – .bmfa zip container read/write
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("bmfa")
    except PackageNotFoundError:
        return "0.0.0"


from .core import (
    GlyphMetadata,
    Origin,
    AtlasMetadata,
    Atlas,
    AtlasImage,
    ErrorKind,
    BmfaError,
)
from .builder import build_atlas
from .container import (
    ContainerConfig,
    load,
    from_reader,
    write_to_file,
    to_writer,
)

__version__ = _get_version()
__copyright__ = "Copyright 2026 The bmfa Authors. Licensed under the MIT License"
__all__: list[str] = [
    "__version__",
    "GlyphMetadata",
    "Origin",
    "AtlasMetadata",
    "Atlas",
    "AtlasImage",
    "ErrorKind",
    "BmfaError",
    "build_atlas",
    "ContainerConfig",
    "load",
    "from_reader",
    "write_to_file",
    "to_writer",
]
