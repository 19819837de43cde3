from enum import Enum
from datetime import datetime
from pathlib import Path
from typing import Optional, List, Dict, Any


class ResultStatus(Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"
    ERROR = "error"


class ModuleStatus(Enum):
    GENERATED = "generated"
    SKIPPED = "skipped"
    FAILED = "failed"


class ModuleResult:
    """Outcome of documenting one module."""

    def __init__(
        self,
        module: str,
        status: ModuleStatus,
        message: str = "",
        output_path: Optional[Path] = None
    ):
        if not isinstance(status, ModuleStatus):
            raise TypeError(f"status must be ModuleStatus enum, got {type(status)}")

        self.module = module
        self.status = status
        self.message = message
        self.output_path = output_path

    @classmethod
    def generated(cls, module: str, output_path: Path) -> 'ModuleResult':
        return cls(module, ModuleStatus.GENERATED, f"Generated {Path(output_path).name}", output_path)

    @classmethod
    def skipped(cls, module: str, message: str = "no public symbols") -> 'ModuleResult':
        return cls(module, ModuleStatus.SKIPPED, message)

    @classmethod
    def failed(cls, module: str, message: str) -> 'ModuleResult':
        return cls(module, ModuleStatus.FAILED, message)

    def to_dict(self) -> Dict[str, Any]:
        result_dict = {
            'module': self.module,
            'status': self.status.value,
            'message': self.message,
        }
        if self.output_path is not None:
            result_dict['output_path'] = str(self.output_path)
        return result_dict

    def __repr__(self) -> str:
        return f"ModuleResult({self.module}: {self.status.value})"


class Result:
    def __init__(
        self,
        status: ResultStatus,
        message: str,
        timestamp: Optional[str] = None,
        module_results: Optional[List[ModuleResult]] = None,
        exit_code: int = 0
    ):
        if not isinstance(status, ResultStatus):
            raise TypeError(f"status must be ResultStatus enum, got {type(status)}")

        self.status = status
        self.message = message
        self.timestamp = timestamp or datetime.now().isoformat()
        self.module_results = module_results
        self.exit_code = exit_code

    @classmethod
    def from_module_results(cls, module_results: List[ModuleResult]) -> 'Result':
        """
        Summarise a generation run.

        SUCCESS when no module failed, PARTIAL when some failed but at least one
        was generated, FAILED when modules failed and none was generated.
        """
        generated = [r for r in module_results if r.status == ModuleStatus.GENERATED]
        failed = [r for r in module_results if r.status == ModuleStatus.FAILED]
        skipped = len(module_results) - len(generated) - len(failed)
        message = f"{len(generated)} generated, {skipped} skipped, {len(failed)} failed"

        if not failed:
            status = ResultStatus.SUCCESS
        elif generated:
            status = ResultStatus.PARTIAL
        else:
            status = ResultStatus.FAILED
        return cls(status=status, message=message, module_results=module_results,
                   exit_code=0 if status == ResultStatus.SUCCESS else 3)

    def to_dict(self) -> Dict[str, Any]:
        result_dict = {
            'status': self.status.value,
            'message': self.message,
            'timestamp': self.timestamp
        }

        if self.module_results is not None:
            result_dict['module_results'] = [mr.to_dict() for mr in self.module_results]

        return result_dict

    def __repr__(self) -> str:
        return f"Result(status={self.status.value}, message={self.message[:50]}...)"
