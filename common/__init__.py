"""Configuration and logging shared by the client entry points."""
from .config import get_config, configure_logger

__all__ = ['get_config', 'configure_logger']
