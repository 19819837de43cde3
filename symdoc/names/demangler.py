"""
Swift demangler runner, the process-backed name resolution capability.
"""

import subprocess
from typing import Dict, List, Optional

from .. import logger
from .name_resolver import BatchResolver

ARROW = " ---> "


class SwiftDemangler(BatchResolver):
    """
    Runs `swift demangle` on batches of Swift precise identifiers.

    Only `s:` identifiers are demangled; they are passed as `$s...` arguments
    and each output line `$sMANGLED ---> Module.Type` yields `Type`.
    """

    def __init__(self, swift_path: str = 'swift', timeout: float = 30, batch_size: int = 200):
        self.swift_path = swift_path
        self.timeout = timeout
        self.batch_size = max(1, batch_size)

    @staticmethod
    def to_mangled(reference: str) -> str:
        return "$s" + reference[len("s:"):]

    @staticmethod
    def parse_output(output: str) -> Dict[str, str]:
        """Map each mangled name in the demangler output to its last dotted component."""
        names = {}
        for line in output.splitlines():
            if ARROW not in line:
                continue
            mangled, demangled = line.split(ARROW, 1)
            demangled = demangled.strip()
            if demangled:
                names[mangled.strip()] = demangled.rsplit(".", 1)[-1]
        return names

    def _run_chunk(self, mangled: List[str]) -> Optional[Dict[str, str]]:
        try:
            result = subprocess.run(
                [self.swift_path, 'demangle'] + mangled,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False
            )
        except FileNotFoundError:
            logger.warning(f"Swift executable not found at '{self.swift_path}', names left unresolved")
            return None
        except subprocess.TimeoutExpired:
            logger.warning(f"swift demangle timed out after {self.timeout}s for {len(mangled)} names")
            return None

        if result.returncode != 0:
            logger.warning(f"swift demangle returned non-zero exit code: {result.returncode}")
            if result.stderr:
                logger.debug(f"swift demangle stderr: {result.stderr[:500]}")
            return None

        return self.parse_output(result.stdout)

    def batch_resolve(self, references: List[str]) -> List[Optional[str]]:
        names: List[Optional[str]] = [None] * len(references)
        swift_positions = [i for i, ref in enumerate(references) if ref.startswith("s:")]

        for start in range(0, len(swift_positions), self.batch_size):
            chunk = swift_positions[start:start + self.batch_size]
            mangled = [self.to_mangled(references[i]) for i in chunk]
            logger.debug(f"Demangling {len(mangled)} Swift names")
            parsed = self._run_chunk(mangled)
            if parsed is None:
                continue
            for position, name in zip(chunk, mangled):
                names[position] = parsed.get(name)

        return names
