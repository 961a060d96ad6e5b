from .options import AppleBaseTargetOptions, apple_base_target_options

__all__ = ["AppleBaseTargetOptions", "apple_base_target_options"]
