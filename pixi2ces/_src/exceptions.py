class Pixi2CesError(Exception):
    """Base class for every error that aborts a conversion"""


class LockfileUnreadable(Pixi2CesError):
    def __init__(self, path, err):
        self.path = path
        self.err = err
        self.msg = f"could not read lockfile at {path}: {err}"
        super().__init__(self.msg)


class EnvironmentNotFound(Pixi2CesError):
    def __init__(self, environment, available=()):
        self.environment = environment
        self.available = list(available)
        self.msg = (
            f"environment not found in lockfile: {environment}"
            f"\nAvailable environments: {', '.join(self.available) or '<none>'}"
        )
        super().__init__(self.msg)


class PlatformNotFound(Pixi2CesError):
    def __init__(self, environment, platform, available=()):
        self.environment = environment
        self.platform = platform
        self.available = list(available)
        self.msg = (
            f"platform not found in lockfile: {platform} (environment: {environment})"
            f"\nAvailable platforms: {', '.join(self.available) or '<none>'}"
        )
        super().__init__(self.msg)


class UnsupportedPackageKind(Pixi2CesError):
    def __init__(self, package):
        self.package = package
        self.msg = (
            f"PyPI packages are not supported, found {package}. "
            f"Specify `--ignore-pypi-errors` to ignore this error"
        )
        super().__init__(self.msg)


class MissingDigest(Pixi2CesError):
    def __init__(self, package):
        self.package = package
        self.msg = f"Package {package.name} does not contain an md5 hash"
        super().__init__(self.msg)


class NoPlatform(Pixi2CesError):
    def __init__(self, stage):
        self.stage = stage
        self.msg = f"No platform specified in explicit environment spec ({stage})"
        super().__init__(self.msg)


class OutputWriteFailed(Pixi2CesError):
    def __init__(self, path, err):
        self.path = path
        self.err = err
        self.msg = f"Could not write environment file {path}: {err}"
        super().__init__(self.msg)
