"""
Payload - ordered bundle of named artifacts delivered to a remote host

Artifacts are keyed by relative path. Re-adding a path overwrites the earlier
content (last writer wins); commands keep their paths distinct by convention.
Content is opaque bytes once added.
"""

import gzip
import io
import os
import tarfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Dict, Iterator, List, Mapping, Tuple, Union

from jinja2 import Template

from nodekit.exceptions import PayloadError

DEFAULT_MODE = 0o644


@dataclass(frozen=True)
class PayloadFile:
    """Location and permissions of a single artifact."""

    path: str
    mode: int = DEFAULT_MODE


@dataclass
class _Artifact:
    spec: PayloadFile
    buffer: io.BytesIO


class Payload:
    """
    Named artifacts that a remote execution needs.

    Example:
        p = Payload()
        p.add_string("validator-keypair.json", identity, mode=0o600)
        with open("install.sh", "rb") as f:
            p.add_reader("steps.sh", f, mode=0o755)
    """

    def __init__(self, root_path: str = "payload"):
        self.root_path = root_path
        self._artifacts: Dict[str, _Artifact] = {}

    def new_writer(self, spec: PayloadFile) -> BinaryIO:
        """
        Return a binary sink bound to ``spec.path``.

        Whatever is written through the sink becomes the artifact's content.
        """
        path = self._normalize(spec.path)
        buffer = io.BytesIO()
        self._artifacts[path] = _Artifact(
            spec=PayloadFile(path=path, mode=spec.mode), buffer=buffer
        )
        return buffer

    def add_reader(self, path: str, reader: BinaryIO, mode: int = DEFAULT_MODE) -> None:
        """Copy a byte stream into the payload. The payload closes the reader."""
        with reader:
            data = reader.read()
        self.add_bytes(path, data, mode=mode)

    def add_bytes(self, path: str, data: bytes, mode: int = DEFAULT_MODE) -> None:
        """Store raw bytes as an artifact."""
        writer = self.new_writer(PayloadFile(path=path, mode=mode))
        writer.write(data)

    def add_string(self, path: str, content: str, mode: int = DEFAULT_MODE) -> None:
        """Store a literal string (UTF-8) as an artifact."""
        self.add_bytes(path, content.encode("utf-8"), mode=mode)

    def add_template(
        self,
        path: str,
        template: Template,
        data: Mapping,
        mode: int = DEFAULT_MODE,
    ) -> None:
        """
        Render a jinja2 template against ``data`` and store the result.

        Rendering errors propagate unchanged and nothing is stored.
        """
        rendered = template.render(**data)
        self.add_string(path, rendered, mode=mode)

    def paths(self) -> List[str]:
        """Artifact paths in insertion order."""
        return list(self._artifacts)

    def read(self, path: str) -> bytes:
        """Return an artifact's content."""
        return self._get(path).buffer.getvalue()

    def mode(self, path: str) -> int:
        """Return an artifact's file mode."""
        return self._get(path).spec.mode

    def items(self) -> Iterator[Tuple[str, bytes]]:
        """Iterate ``(path, content)`` pairs in insertion order."""
        for path, artifact in self._artifacts.items():
            yield path, artifact.buffer.getvalue()

    def write_to(self, directory: Union[str, Path]) -> List[Path]:
        """
        Materialize every artifact under a local directory.

        Args:
            directory: Destination directory (created if missing)

        Returns:
            Written file paths, in insertion order
        """
        root = Path(directory)
        root.mkdir(parents=True, exist_ok=True)

        written = []
        for path, artifact in self._artifacts.items():
            target = root / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(artifact.buffer.getvalue())
            os.chmod(target, artifact.spec.mode)
            written.append(target)

        return written

    def write_tar(self, fileobj: BinaryIO) -> None:
        """
        Write a gzip tarball of the payload, rooted at ``root_path``.

        Entries carry fixed ownership and timestamps, so identical payloads
        produce identical archives.
        """
        with gzip.GzipFile(
            filename="", mode="wb", fileobj=fileobj, mtime=0
        ) as gz, tarfile.open(fileobj=gz, mode="w", format=tarfile.PAX_FORMAT) as tar:
            for path, artifact in self._artifacts.items():
                data = artifact.buffer.getvalue()
                info = tarfile.TarInfo(name=f"{self.root_path}/{path}")
                info.size = len(data)
                info.mode = artifact.spec.mode
                info.mtime = 0
                info.uid = info.gid = 0
                info.uname = info.gname = "root"
                tar.addfile(info, io.BytesIO(data))

    def _get(self, path: str) -> _Artifact:
        try:
            return self._artifacts[self._normalize(path)]
        except KeyError:
            raise PayloadError(
                f"No artifact at '{path}'",
                context=f"Payload contains: {', '.join(self._artifacts) or 'nothing'}",
            ) from None

    @staticmethod
    def _normalize(path: str) -> str:
        pure = PurePosixPath(path)
        if not path or not pure.parts or pure.is_absolute() or ".." in pure.parts:
            raise PayloadError(
                f"Invalid payload path: '{path}'",
                context="Paths must be relative and stay inside the payload",
            )
        return str(pure)

    def __contains__(self, path: str) -> bool:
        try:
            return self._normalize(path) in self._artifacts
        except PayloadError:
            return False

    def __len__(self) -> int:
        return len(self._artifacts)

    def __repr__(self) -> str:
        return f"Payload(root={self.root_path}, artifacts={self.paths()})"
