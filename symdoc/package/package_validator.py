from pathlib import Path

MANIFEST_NAME = "Package.swift"


class PackageValidationError(Exception):
    """Raised when the directory is not the root of a Swift package."""


class PackageValidator:
    def __init__(self, package_dir: Path = Path('.')):
        self.package_dir = Path(package_dir)

    def validate(self):
        manifest = self.package_dir / MANIFEST_NAME
        if not manifest.is_file():
            raise PackageValidationError(
                f"{MANIFEST_NAME} not found in {self.package_dir.resolve()}. "
                "Please run from the root of a Swift package."
            )
