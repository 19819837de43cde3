import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

# Used for any key tools.json leaves out
_DEFAULTS: Dict[str, Any] = {
    'swift': 'swift',
    'demangle_timeout': 30,
    'demangle_batch_size': 200,
    'name_cache_size': 1000,
    'max_workers': 4,
    'workspace': 'workspace',
}

CONFIG_ENV = 'SYMDOC_TOOLS_JSON'


class ToolConfig:
    _instance = None
    _config: Dict[str, Any] = {}
    _source: Optional[Path] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    @classmethod
    def reset(cls):
        """Drop the singleton so the next ToolConfig() re-reads tools.json (for testing)."""
        cls._instance = None

    @staticmethod
    def _candidate_paths():
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            yield Path(env_path)
        yield Path.cwd() / "tools.json"
        yield Path(__file__).parent.parent / "tools.json"

    def _load_config(self):
        self._config = dict(_DEFAULTS)
        self._source = None

        for config_path in self._candidate_paths():
            if config_path.exists():
                with open(config_path, 'r') as f:
                    self._config.update(json.load(f))
                self._source = config_path
                break

    @property
    def source(self) -> Optional[Path]:
        """Path of the tools.json that was loaded, or None if only defaults apply."""
        return self._source

    def get(self, key: str) -> Any:
        if key not in self._config:
            raise KeyError(f"Setting '{key}' not found in tools.json")
        return self._config[key]

    def get_tool_path(self, tool_name: str) -> str:
        return str(self.get(tool_name))

    @property
    def swift_path(self) -> str:
        return self.get_tool_path('swift')

    @property
    def demangle_timeout(self) -> float:
        return float(self.get('demangle_timeout'))

    @property
    def demangle_batch_size(self) -> int:
        return int(self.get('demangle_batch_size'))

    @property
    def name_cache_size(self) -> int:
        return int(self.get('name_cache_size'))

    @property
    def max_workers(self) -> int:
        return int(self.get('max_workers'))

    @property
    def workspace(self) -> Path:
        return Path(self.get('workspace'))
