"""
Configuration module for the reporting system.
"""
from .settings import (
    ReportingSystemConfig,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'ReportingSystemConfig',
    'get_config',
    'load_config',
    'reload_config'
]
