from .error_handler import cli_varpp_error_handler

__all__ = ["cli_varpp_error_handler"]
