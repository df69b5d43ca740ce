"""
Data Module - Auxiliary Transformation Data

Provides:
- Version layout table (sizing rules per benchmark version)
- AuxiliaryDataStore (best-effort loading of shift/rotation/shuffle files)
- Function bias table
- Synthetic data writer
"""

from .layout import DataKind, VersionLayout, VERSION_LAYOUTS, get_layout
from .store import AuxiliaryDataStore, LoadResult, read_tokens, read_rows
from .bias import BIAS_TABLE, function_bias
from .generate import write_auxiliary_data, random_rotation

__all__ = [
    'DataKind',
    'VersionLayout',
    'VERSION_LAYOUTS',
    'get_layout',
    'AuxiliaryDataStore',
    'LoadResult',
    'read_tokens',
    'read_rows',
    'BIAS_TABLE',
    'function_bias',
    'write_auxiliary_data',
    'random_rotation',
]
