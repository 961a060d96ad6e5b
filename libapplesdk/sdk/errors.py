from __future__ import annotations

from typing import TYPE_CHECKING

from libapplesdk.exceptions import AppleSdkError

if TYPE_CHECKING:
    from libapplesdk.sdk.kinds import SdkKind


class SdkLookupError(AppleSdkError):
    """SDK lookup tool (`xcrun`) cannot be spawned or exited with an error."""

    def __init__(self, *args: object, kind: SdkKind, cause: str) -> None:
        super().__init__(*args)
        self.kind = kind
        self.cause = cause

    def __str__(self) -> str:
        return f"failed to get {self.kind.sdk_name} SDK path: {self.cause}"

    def __repr__(self) -> str:
        return f"""Unable to locate {self.kind.display_name} SDK!

Tried to query SDK path for `{self.kind.sdk_name}` via SDK lookup tool, but it failed:
{self.cause}

Possible solutions: Install Xcode or Command Line Tools (`xcode-select --install`), check `xcode-select -p` output

{self.generic_error_name}"""
