import re


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class AppleSdkError(Exception):
    """Parent for all errors raised while resolving Apple SDK configuration."""

    def __repr__(self) -> str:
        # Subclasses are expected to give an hint how to fix the environment
        return f"""Failed to resolve Apple SDK configuration: {self}

{self.generic_error_name}"""

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"
