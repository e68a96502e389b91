"""Artifact stores feeding the inliner and receiving its outputs."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from contract.artifacts import ArtifactId

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
    from pathlib import Path

    Classifier = Callable[[ArtifactId], bool]


@dataclass(frozen=True)
class Artifact:
    """A build artifact whose text content is read lazily."""

    id: ArtifactId
    reader: Callable[[], Awaitable[str]]

    async def read_as_string(self) -> str:
        return await self.reader()

    @classmethod
    def from_string(cls, artifact_id: ArtifactId, text: str) -> Artifact:
        async def _read() -> str:
            return text

        return cls(id=artifact_id, reader=_read)


class ArtifactSink(Protocol):
    async def add_output(self, artifact_id: ArtifactId, text: str) -> None: ...


class InMemoryArtifactStore:
    """Artifacts held in a dict; outputs overwrite inputs under the same id."""

    def __init__(self, contents: Mapping[ArtifactId | str, str] | None = None) -> None:
        self._contents: dict[ArtifactId, str] = {}
        for key, text in (contents or {}).items():
            artifact_id = key if isinstance(key, ArtifactId) else ArtifactId.parse(key)
            self._contents[artifact_id] = text
        self.outputs: dict[ArtifactId, str] = {}

    async def primary_inputs(self, classify: Classifier) -> AsyncIterator[Artifact]:
        for artifact_id, text in list(self._contents.items()):
            if classify(artifact_id):
                yield Artifact.from_string(artifact_id, text)

    async def add_output(self, artifact_id: ArtifactId, text: str) -> None:
        self.outputs[artifact_id] = text
        self._contents[artifact_id] = text

    def read(self, artifact_id: ArtifactId | str) -> str:
        if not isinstance(artifact_id, ArtifactId):
            artifact_id = ArtifactId.parse(artifact_id)
        return self._contents[artifact_id]


class FileSystemArtifactStore:
    """Artifacts of a single package laid out as files under ``root``."""

    def __init__(self, root: Path, package: str) -> None:
        self.root = root
        self.package = package

    def _path_for(self, artifact_id: ArtifactId) -> Path:
        return self.root / artifact_id.path

    def _matching_files(self, classify: Classifier) -> list[tuple[ArtifactId, Path]]:
        matches: list[tuple[ArtifactId, Path]] = []
        for file_path in sorted(self.root.rglob("*")):
            if not file_path.is_file():
                continue
            artifact_id = ArtifactId(
                package=self.package,
                path=file_path.relative_to(self.root).as_posix(),
            )
            if classify(artifact_id):
                matches.append((artifact_id, file_path))
        return matches

    async def primary_inputs(self, classify: Classifier) -> AsyncIterator[Artifact]:
        # The directory walk runs in a worker thread, off the event loop.
        matches = await asyncio.to_thread(self._matching_files, classify)
        for artifact_id, file_path in matches:
            yield Artifact(id=artifact_id, reader=self._reader_for(file_path))

    def _reader_for(self, file_path: Path) -> Callable[[], Awaitable[str]]:
        async def _read() -> str:
            return await asyncio.to_thread(file_path.read_text, encoding="utf-8")

        return _read

    def _write(self, artifact_id: ArtifactId, text: str) -> None:
        path = self._path_for(artifact_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    async def add_output(self, artifact_id: ArtifactId, text: str) -> None:
        await asyncio.to_thread(self._write, artifact_id, text)


__all__ = [
    "Artifact",
    "ArtifactSink",
    "FileSystemArtifactStore",
    "InMemoryArtifactStore",
]
