"""
Package information from `swift package describe --type json`.
"""

import json
import subprocess
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from .. import logger


class PackageInfoError(RuntimeError):
    """Raised when the package description cannot be obtained or decoded."""


class PackageInfoProvider:
    """
    Runs `swift package describe` once and answers questions about the package.

    The decoded description is cached for the lifetime of the provider.
    """

    def __init__(self, package_dir: Path = Path('.'), swift_path: str = 'swift'):
        self.package_dir = Path(package_dir)
        self.swift_path = swift_path
        self._description: Optional[Dict[str, Any]] = None
        self._lock = threading.Lock()

    def _run_describe(self) -> Dict[str, Any]:
        logger.info(f"Running swift package describe in {self.package_dir}")
        try:
            result = subprocess.run(
                [self.swift_path, 'package', 'describe', '--type', 'json'],
                cwd=str(self.package_dir),
                capture_output=True,
                text=True,
                check=False
            )
        except FileNotFoundError:
            raise PackageInfoError(
                f"Swift executable not found at '{self.swift_path}'. "
                "Please install Swift and ensure it's in PATH."
            )

        if result.returncode != 0:
            if result.stderr:
                logger.debug(f"swift package describe stderr: {result.stderr[:500]}")
            raise PackageInfoError("Failed to run 'swift package describe'")

        try:
            description = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise PackageInfoError(f"Failed to parse package description JSON: {e}") from e
        if not isinstance(description, dict):
            raise PackageInfoError("Failed to parse package description JSON: not an object")
        return description

    def load_package_description(self) -> Dict[str, Any]:
        """
        Decoded package description.

        Raises:
            PackageInfoError: If swift fails or prints something that isn't a JSON object
        """
        with self._lock:
            if self._description is None:
                self._description = self._run_describe()
            return self._description

    def extract_public_modules(self) -> List[str]:
        """Sorted names of all targets that belong to at least one product."""
        modules = set()
        for product in self.load_package_description().get('products', []):
            modules.update(product.get('targets', []))
        return sorted(modules)

    def load_target_paths(self) -> Dict[str, str]:
        """Target name -> source path (relative to the package directory)."""
        try:
            return {
                target['name']: target['path']
                for target in self.load_package_description().get('targets', [])
            }
        except (KeyError, TypeError) as e:
            raise PackageInfoError(f"Malformed target in package description: {e}") from e
