"""Tests for namespace specifier classification and kind-specific modes."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from specparse.errors import InvalidNamespaceError
from specparse.namespaces.classifier import (
    LinuxNS,
    NamespaceKind,
    classify_namespace,
    is_ns,
    is_pod,
    ns_path,
    valid,
)
from specparse.namespaces.modes import (
    CgroupnsMode,
    IpcMode,
    NetworkMode,
    PidMode,
    UsernsMode,
    UTSMode,
    namespace_mode,
)


@dataclass
class FixedNS:
    answer: bool
    calls: int = 0

    def valid(self) -> bool:
        self.calls += 1
        return self.answer


class TestClassifier:
    def test_pod(self) -> None:
        ns = FixedNS(False)
        result = classify_namespace("pod", ns)
        assert result.kind is NamespaceKind.POD
        assert result.path is None
        assert ns.calls == 0

    def test_explicit_path(self) -> None:
        result = classify_namespace("ns:/proc/1/ns/net", FixedNS(False))
        assert result.kind is NamespaceKind.EXPLICIT
        assert result.path == "/proc/1/ns/net"
        assert result.raw == "ns:/proc/1/ns/net"

    def test_explicit_keeps_later_colons(self) -> None:
        assert classify_namespace("ns:/run/a:b", FixedNS(False)).path == "/run/a:b"

    @pytest.mark.parametrize("answer", [True, False])
    def test_delegates_to_predicate(self, answer: bool) -> None:
        ns = FixedNS(answer)
        assert valid("host", ns) is answer
        assert ns.calls == 1

    def test_kind_specific(self) -> None:
        result = classify_namespace("host", FixedNS(True))
        assert result.kind is NamespaceKind.KIND
        assert result.path is None

    def test_invalid(self) -> None:
        with pytest.raises(InvalidNamespaceError, match="invalid namespace specifier: bogus"):
            _ = classify_namespace("bogus", FixedNS(False))

    def test_predicate_must_have_valid(self) -> None:
        with pytest.raises(TypeError):
            _ = classify_namespace("host", object())  # pyright: ignore[reportArgumentType]

    def test_protocol_is_structural(self) -> None:
        assert isinstance(FixedNS(True), LinuxNS)
        assert isinstance(NetworkMode("host"), LinuxNS)
        assert not isinstance("host", LinuxNS)

    @pytest.mark.parametrize(
        ("value", "pod", "ns"),
        [
            ("pod", True, False),
            ("POD", False, False),
            ("ns:/proc/1/ns/pid", False, True),
            ("ns:", False, True),
            ("ns", False, False),
            ("nsx:/proc", False, False),
            ("container:ns", False, False),
        ],
    )
    def test_predicates(self, value: str, pod: bool, ns: bool) -> None:
        assert is_pod(value) is pod
        assert is_ns(value) is ns

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("ns:/proc/1/ns/net", "/proc/1/ns/net"), ("/proc/1/ns/net", ""), ("a:b:c", "b:c"), ("", "")],
    )
    def test_ns_path(self, value: str, expected: str) -> None:
        assert ns_path(value) == expected

    def test_pod_literal_from_config(self, write_config) -> None:
        _ = write_config({"namespace": {"pod": "shared"}})
        assert is_pod("shared")
        assert not is_pod("pod")
        assert is_ns("ns:/x")


class TestModes:
    @pytest.mark.parametrize("value", ["", "bridge", "host", "none", "private", "slirp4netns", "container:web"])
    def test_network_valid(self, value: str) -> None:
        assert NetworkMode(value).valid()

    @pytest.mark.parametrize("value", ["container:", "overlay", "Host"])
    def test_network_invalid(self, value: str) -> None:
        assert not NetworkMode(value).valid()

    def test_container_helpers(self) -> None:
        mode = PidMode("container:abc123")
        assert mode.valid()
        assert mode.is_container()
        assert mode.container() == "abc123"
        assert PidMode("host").container() == ""

    def test_ipc(self) -> None:
        assert IpcMode("shareable").valid()
        assert IpcMode("shareable").is_shareable()
        assert not PidMode("shareable").valid()

    def test_userns_has_no_container_form(self) -> None:
        assert UsernsMode("keep-id").valid()
        assert UsernsMode("auto").valid()
        assert not UsernsMode("container:abc").valid()
        assert UsernsMode("container:abc").container() == ""

    def test_simple_modes(self) -> None:
        assert UTSMode("host").is_host()
        assert CgroupnsMode("").is_private()
        assert not CgroupnsMode("container:x").valid()
        assert str(NetworkMode("bridge")) == "bridge"

    @pytest.mark.parametrize(
        ("kind", "cls"),
        [("net", NetworkMode), ("pid", PidMode), ("ipc", IpcMode), ("user", UsernsMode), ("uts", UTSMode),
         ("cgroup", CgroupnsMode)],
    )
    def test_namespace_mode(self, kind: str, cls: type) -> None:
        mode = namespace_mode(kind, "host")
        assert type(mode) is cls
        assert mode.value == "host"

    def test_namespace_mode_unknown_kind(self) -> None:
        with pytest.raises(InvalidNamespaceError, match="unknown namespace kind: mnt"):
            _ = namespace_mode("mnt", "host")

    def test_classify_with_mode(self) -> None:
        result = classify_namespace("container:abc", NetworkMode("container:abc"))
        assert result.kind is NamespaceKind.KIND
        with pytest.raises(InvalidNamespaceError):
            _ = classify_namespace("overlay", NetworkMode("overlay"))
