DEFAULT_ENVIRONMENT = "default"

DEFAULT_MANIFEST = "pixi.toml"

# pixi always writes the lockfile next to the manifest
LOCKFILE_NAME = "pixi.lock"

OUTPUT_FILENAME_TEMPLATE = "conda-{platform}-{environment}.lock"

GENERATED_BY = "pixi :: pixi2ces"

# tells conda to skip the solver and install the urls as listed
EXPLICIT_MARKER = "@EXPLICIT"
