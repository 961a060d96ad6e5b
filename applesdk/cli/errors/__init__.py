from .error_handler import cli_apple_sdk_error_handler

__all__ = ["cli_apple_sdk_error_handler"]
