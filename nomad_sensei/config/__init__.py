from .config_loader import ConfigLoader, setup_logging

__all__ = ["ConfigLoader", "setup_logging"]
