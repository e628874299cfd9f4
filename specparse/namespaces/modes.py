# Kind-specific namespace values, each usable as the LinuxNS predicate.
from dataclasses import dataclass
from typing import Dict, Type
from specparse.errors import InvalidNamespaceError

CONTAINER_PREFIX = "container:"


@dataclass(frozen=True)
class _Mode:
    value: str = ""

    simple = frozenset({"", "host", "private"})
    allows_container = True

    def __str__(self) -> str:
        return self.value

    def is_host(self) -> bool:
        return self.value == "host"

    def is_private(self) -> bool:
        # empty means the runtime default, which is a private namespace
        return self.value in ("", "private")

    def is_container(self) -> bool:
        return self.allows_container and self.value.startswith(CONTAINER_PREFIX)

    def container(self) -> str:
        """Name or id of the container whose namespace is joined, else ""."""
        if self.is_container():
            return self.value[len(CONTAINER_PREFIX):]
        return ""

    def valid(self) -> bool:
        if self.value in self.simple:
            return True
        return self.is_container() and self.container() != ""


class NetworkMode(_Mode):
    simple = frozenset({"", "bridge", "host", "none", "private", "slirp4netns"})

    def is_bridge(self) -> bool:
        return self.value == "bridge"

    def is_none(self) -> bool:
        return self.value == "none"


class PidMode(_Mode):
    pass


class UTSMode(_Mode):
    pass


class IpcMode(_Mode):
    simple = frozenset({"", "host", "private", "shareable", "none"})

    def is_shareable(self) -> bool:
        return self.value == "shareable"


class UsernsMode(_Mode):
    simple = frozenset({"", "host", "private", "keep-id", "auto"})
    allows_container = False


class CgroupnsMode(_Mode):
    allows_container = False


MODES_BY_KIND: Dict[str, Type[_Mode]] = {
    "net": NetworkMode,
    "pid": PidMode,
    "ipc": IpcMode,
    "user": UsernsMode,
    "uts": UTSMode,
    "cgroup": CgroupnsMode,
}


def namespace_mode(kind: str, raw: str) -> _Mode:
    try:
        cls = MODES_BY_KIND[kind]
    except KeyError as e:
        raise InvalidNamespaceError(
            f"unknown namespace kind: {kind} (expected one of {', '.join(MODES_BY_KIND)})", kind) from e
    return cls(raw)
