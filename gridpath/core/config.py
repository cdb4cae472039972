"""
Configuration management for grid path finding with Pydantic validation
"""

from typing import Dict, Optional, Union, Any, Literal
from pathlib import Path
import json
import os
import re

import yaml
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .coordinate import Coordinate
from .flatten import OnPathPolicy


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class CoordinateModel(BaseModel):
    """A grid cell as written in the input file"""
    x: int = Field(..., description="Column")
    y: int = Field(..., description="Row")

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)


class SearchConfig(BaseModel):
    """Search settings"""
    heuristic: Literal['euclidean', 'manhattan', 'legacy'] = Field(
        'euclidean', description="Distance estimate used by A*"
    )
    on_path_policy: Literal['endpoints', 'consecutive'] = Field(
        'endpoints', description="Rule for marking edges as part of the path"
    )


class RenderConfig(BaseModel):
    """Image rendering settings"""
    scale: int = Field(10, gt=0, description="Pixels per grid cell")


class GridConfigModel(BaseModel):
    """Pydantic model for path finding configuration validation"""
    model_config = ConfigDict(extra='ignore')  # Ignore extra fields in the input file

    start: CoordinateModel
    goal: CoordinateModel
    width: int = Field(..., description="Number of columns")
    height: int = Field(..., description="Number of rows")

    # Top-level scale, as in the flat input format
    scale: Optional[int] = Field(None, gt=0, description="Pixels per grid cell")

    search: SearchConfig = Field(default_factory=SearchConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @model_validator(mode='after')
    def apply_top_level_scale(self):
        """Top-level scale overrides render.scale"""
        if self.scale is not None:
            self.render = RenderConfig(scale=self.scale)
        return self


# ============================================================================
# Environment Variable Substitution
# ============================================================================

def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values

    Supports multiple formats:
    - ${VAR_NAME}
    - $VAR_NAME
    - ${VAR_NAME:-default_value}  (with default)

    Args:
        value: Configuration value (can be str, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        def replace_with_default(match):
            var_name = match.group(1)
            default_value = match.group(3) if match.group(2) else None
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set and no default value provided")

        value = re.sub(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}', replace_with_default, value)

        def replace_simple(match):
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set")

        value = re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', replace_simple, value)

        return value

    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    else:
        # Return other types as-is (int, bool, None, etc.)
        return value


# ============================================================================
# GridConfig Class (wrapper around Pydantic model)
# ============================================================================

class GridConfig:
    """Grid dimensions, start/goal cells and rendering settings"""

    def __init__(self, config_dict: Dict):
        """Initialize from dictionary (parsed from JSON or YAML) with Pydantic validation"""
        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

        config_dict = _substitute_env_vars(config_dict)

        try:
            self._model = GridConfigModel(**config_dict)
        except Exception as e:
            raise ValueError(f"Configuration validation failed: {str(e)}") from e

        # Grid
        self.width = self._model.width
        self.height = self._model.height
        self.start = self._model.start.to_coordinate()
        self.goal = self._model.goal.to_coordinate()

        # Search
        self.heuristic = self._model.search.heuristic
        self.on_path_policy = OnPathPolicy(self._model.search.on_path_policy)

        # Rendering
        self.scale = self._model.render.scale

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GridConfig':
        return cls(config_dict)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> 'GridConfig':
        """Load configuration from a JSON (.json) or YAML file with validation"""
        config_path = Path(config_path)
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix.lower() == '.json':
                    config_dict = json.load(f)
                else:
                    config_dict = yaml.safe_load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON file: {str(e)}") from e
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML file: {str(e)}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        except OSError as e:
            raise ValueError(f"Failed to read configuration file {config_path}: {e}") from e

        return cls(config_dict)

    def to_dict(self) -> Dict:
        """Convert config back to dictionary, in the input file format"""
        return {
            'start': self.start.as_dict(),
            'goal': self.goal.as_dict(),
            'width': self.width,
            'height': self.height,
            'scale': self.scale,
            'search': {
                'heuristic': self.heuristic,
                'on_path_policy': self.on_path_policy.value
            }
        }
