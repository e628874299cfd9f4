import enum
from typing import Optional, Protocol, runtime_checkable
from pydantic import BaseModel, ConfigDict
from logpkg.log_kcld import LogKCld, log_to_file
from specparse.ReadConfig import ReadConfig as rc
from specparse.errors import InvalidNamespaceError

logger = LogKCld()

# Pod signifies a kernel namespace is being shared by a container
# with the pod it is associated with
POD = "pod"


@runtime_checkable
class LinuxNS(Protocol):
    """Anything that can tell whether its namespace value is valid."""

    def valid(self) -> bool:
        ...


class NamespaceKind(str, enum.Enum):
    POD = "pod"
    EXPLICIT = "explicit"
    KIND = "kind"


class NamespaceSpecifier(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    raw: str
    kind: NamespaceKind
    path: Optional[str] = None


def _pod_literal() -> str:
    return rc().namespace_config.get('pod', POD)


def _ns_prefix() -> str:
    return rc().namespace_config.get('ns_prefix', 'ns')


def is_pod(s: str) -> bool:
    return s == _pod_literal()


def is_ns(s: str) -> bool:
    """True when s has the ns: prefix."""
    parts = s.split(":", 1)
    return len(parts) > 1 and parts[0] == _ns_prefix()


def ns_path(s: str) -> str:
    """The path to the namespace to join, or "" when s has no colon."""
    parts = s.split(":", 1)
    if len(parts) > 1:
        return parts[1]
    return ""


def valid(s: str, ns: LinuxNS) -> bool:
    """s should be the string representation of ns."""
    return is_pod(s) or is_ns(s) or ns.valid()


@log_to_file(logger)
def classify_namespace(s: str, ns: LinuxNS) -> NamespaceSpecifier:
    if is_pod(s):
        return NamespaceSpecifier(raw=s, kind=NamespaceKind.POD)
    if is_ns(s):
        return NamespaceSpecifier(raw=s, kind=NamespaceKind.EXPLICIT, path=ns_path(s))
    if not isinstance(ns, LinuxNS):
        raise TypeError(f"{type(ns).__name__} does not implement valid()")
    if ns.valid():
        return NamespaceSpecifier(raw=s, kind=NamespaceKind.KIND)
    raise InvalidNamespaceError(f"invalid namespace specifier: {s}", s)
