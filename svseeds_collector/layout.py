"""Fixed names of the SvSeeds UI package and its on-disk layout."""

from pathlib import Path

PACKAGE_NAME = "@scirexs/svseeds-ui"
TARBALL_PREFIX = "scirexs-svseeds-ui"
COMPONENT_DIR = "_svseeds"
SCRATCH_PREFIX = "tmp_svseeds_"

COMPONENT_EXT = ".svelte"
INTERNAL_PREFIX = "_"

# Support files tracked alongside components
CORE_FILE = "__core.ts"
STYLE_FILE = "__style.ts"
SUPPORT_FILES = (CORE_FILE, STYLE_FILE)

DEFAULT_DIR = str(Path("src") / "lib" / COMPONENT_DIR)
DEFAULT_REGISTRY = "https://registry.npmjs.org"
