from .logging_config import configure_root_logger, get_logger

__all__ = ["configure_root_logger", "get_logger"]
