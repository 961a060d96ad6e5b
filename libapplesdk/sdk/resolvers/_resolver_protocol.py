from abc import ABC, abstractmethod
from pathlib import Path

from libapplesdk.environment import EnvironmentSnapshot
from libapplesdk.sdk.kinds import SdkKind


class SdkRootResolverProtocol(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def resolve(
        self,
        requested_kind: SdkKind,
        environment: EnvironmentSnapshot,
    ) -> Path | None:
        """Resolve SDK root for requested kind.

        None means that there is no override available and caller must use compiler default one

        :param requested_kind: SDK kind that is being compiled for
        :param environment: Snapshot of environment variables
        """
        ...
