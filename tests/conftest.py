"""Configure tests."""

import os
import stat
from pathlib import Path

import httpx
import pytest

from tzpatch.domain.models import RESOURCE_MANIFEST

FAKE_TOOL_SCRIPT = """#!/bin/sh
echo "$(pwd -P)|$*" >> "{log}"
if [ -n "$FAKE_TOOL_FAIL_ON" ] && [ "$2" = "$FAKE_TOOL_FAIL_ON" ]; then
    echo "icupkg: unable to add $2 to $3" >&2
    exit 3
fi
if [ ! -f "$2" ]; then
    echo "icupkg: $2 not found" >&2
    exit 4
fi
echo "added $2"
exit 0
"""


def write_executable(path: Path, content: str) -> Path:
    """Write a script and mark it executable."""
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


class FakeTool:
    """Shell script standing in for icupkg, logging every invocation."""

    def __init__(self, bin_dir: Path, name: str = "icupkg"):
        self.name = name
        self.log = bin_dir / f"{name}.log"
        self.path = write_executable(bin_dir / name, FAKE_TOOL_SCRIPT.format(log=self.log))

    @property
    def calls(self) -> list[tuple[str, list[str]]]:
        """Return (cwd, args) for every invocation so far."""
        if not self.log.exists():
            return []
        calls = []
        for line in self.log.read_text().splitlines():
            cwd, _, args = line.partition("|")
            calls.append((cwd, args.split()))
        return calls


class FakeServer:
    """httpx mock transport serving resource files by name."""

    def __init__(self, bodies: dict[str, bytes] | None = None):
        self.bodies = bodies if bodies is not None else {}
        self.statuses: dict[str, int] = {}
        self.requested: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        name = url.rsplit("/", 1)[-1]
        status = self.statuses.get(name, 200 if name in self.bodies else 404)
        if status != 200:
            return httpx.Response(status, content=b"Not Found")
        return httpx.Response(200, content=self.bodies[name])

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    @property
    def requested_names(self) -> list[str]:
        return [url.rsplit("/", 1)[-1] for url in self.requested]


@pytest.fixture
def target_file(tmp_path):
    """Create a 2MB stub ICU data bundle."""
    target = tmp_path / "icudt61l.dat"
    target.write_bytes(b"\0" * (2 * 1024 * 1024))
    return target


@pytest.fixture
def work_dir(tmp_path):
    """Create an empty working directory."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def resource_bodies():
    """Distinct body for each manifest resource."""
    return {name: f"ResB {name}".encode() * 64 for name in RESOURCE_MANIFEST}


@pytest.fixture
def fake_server(resource_bodies):
    """Server answering 200 for every manifest resource."""
    return FakeServer(dict(resource_bodies))


@pytest.fixture
def fake_tool(tmp_path, monkeypatch):
    """Put a fake icupkg first on PATH."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    tool = FakeTool(bin_dir)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.delenv("FAKE_TOOL_FAIL_ON", raising=False)
    return tool


@pytest.fixture
def make_executable():
    """Return a helper writing executable scripts."""
    return write_executable
