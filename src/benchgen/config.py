"""
Configuration

Explicit knobs for problem construction. Nothing here is read from hidden
global state: a config is built by the caller and handed to the factory.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class MissingDataPolicy(Enum):
    """What to do when auxiliary data is missing or too short."""
    FAIL = "fail"
    IDENTITY = "identity"


@dataclass
class BenchgenConfig:
    """Configuration for problem construction."""
    data_root: Optional[Union[str, Path]] = None
    apply_bias: bool = True
    missing_data: MissingDataPolicy = MissingDataPolicy.FAIL
    cache_data: bool = True
    optimum_rtol: float = 1e-8

    def __post_init__(self):
        if self.data_root is not None:
            self.data_root = Path(self.data_root)
        if isinstance(self.missing_data, str):
            self.missing_data = MissingDataPolicy(self.missing_data)


DEFAULT_CONFIG = BenchgenConfig()
