"""Create a project directory and populate it from a template directory."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from .errors import (
    CopyError,
    DestinationFileExistsError,
    DirectoryCreateFailedError,
    ParentNotDirectoryError,
    ReadFailedError,
    TemplateListFailedError,
    WriteFailedError,
)
from .io.adapters.local import LocalFileSystem
from .io.interfaces import FileSystem, FileSystemError
from .io.schema import CopyOutcome, ScaffoldResult
from .paths import (
    SeparatorStyle,
    base_name,
    current_style,
    join,
    to_canonical_form,
    to_platform_form,
)

__all__ = ["DEFAULT_ENTRY_FILE", "DIRECTORY_MODE", "ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)

DEFAULT_ENTRY_FILE = "index.html"
DIRECTORY_MODE = 0o777


class ProjectScaffolder:
    """Copy the files of ``template_dir`` into freshly created project folders.

    Paths handed to the public coroutines may be in canonical or platform form;
    they are converted to platform form before reaching ``filesystem``.
    ``open_file`` is called with the canonical path of the entry file once a
    scaffold has completed and the entry file exists.
    """

    def __init__(
        self,
        template_dir: str,
        filesystem: FileSystem | None = None,
        *,
        style: SeparatorStyle | None = None,
        entry_file: str = DEFAULT_ENTRY_FILE,
        open_file: Callable[[str], None] | None = None,
    ) -> None:
        self.style = style or current_style()
        self.template_dir = to_platform_form(str(template_dir), style=self.style)
        self.filesystem = filesystem or LocalFileSystem()
        self.entry_file = entry_file
        self.open_file = open_file

    def _platform(self, path: str) -> str:
        return to_platform_form(path, style=self.style)

    async def copy_file(self, destination: str, source: str) -> str:
        """Copy ``source`` into the ``destination`` directory without overwriting.

        Returns the platform path that was written. A failed write may leave a
        partial file behind; no cleanup is attempted.
        """

        source = self._platform(source)
        out_file = join(self._platform(destination), base_name(source, style=self.style), style=self.style)

        try:
            await self.filesystem.stat(out_file)
        except FileSystemError as exc:
            if not exc.not_found:
                raise WriteFailedError(out_file, exc.code) from exc
        else:
            raise DestinationFileExistsError(out_file)

        try:
            contents = await self.filesystem.read_file(source, "utf-8")
        except FileSystemError as exc:
            raise ReadFailedError(source, exc.code) from exc

        try:
            await self.filesystem.write_file(out_file, contents, "utf-8")
        except FileSystemError as exc:
            raise WriteFailedError(out_file, exc.code) from exc

        LOGGER.debug("copied %s -> %s", source, out_file)
        return out_file

    async def copy_template_files(self, destination: str) -> CopyOutcome:
        """Copy every template entry into ``destination`` concurrently.

        Individual copy failures are counted in the returned outcome. Only a
        failure to list the template directory aborts the operation.
        """

        try:
            names = list(await self.filesystem.list_directory(self.template_dir))
        except FileSystemError as exc:
            LOGGER.error("unable to list templates in %s: %s", self.template_dir, exc.code)
            raise TemplateListFailedError(self.template_dir, exc.code) from exc

        LOGGER.debug("copying %d template file(s) from %s", len(names), self.template_dir)
        results = await asyncio.gather(
            *(
                self.copy_file(destination, join(self.template_dir, name, style=self.style))
                for name in names
            ),
            return_exceptions=True,
        )

        copied: list[str] = []
        failed: dict[str, str] = {}
        unexpected: BaseException | None = None
        for name, result in zip(names, results):
            if isinstance(result, CopyError):
                LOGGER.warning("template %s not copied: %s", name, result)
                failed[name] = result.code or "EUNKNOWN"
            elif isinstance(result, BaseException):
                unexpected = unexpected or result
            else:
                copied.append(name)

        if unexpected is not None:
            raise unexpected

        return CopyOutcome(attempted=len(names), copied=tuple(copied), failed=failed)

    async def create(self, parent: str, project_dir: str) -> ScaffoldResult:
        """Create ``project_dir`` inside ``parent`` and copy the templates into it.

        Raises :class:`ParentNotDirectoryError`, :class:`DirectoryCreateFailedError`
        or :class:`TemplateListFailedError`; nothing is created when the parent
        check fails. Partial template copies still count as success.
        """

        parent_path = self._platform(parent)
        try:
            parent_stat = await self.filesystem.stat(parent_path)
        except FileSystemError as exc:
            LOGGER.error("parent folder %s unavailable: %s", parent_path, exc.code)
            raise ParentNotDirectoryError(parent_path, exc.code) from exc
        if not parent_stat.is_directory:
            LOGGER.error("parent folder %s is not a directory", parent_path)
            raise ParentNotDirectoryError(parent_path)

        project_path = self._platform(project_dir)
        try:
            await self.filesystem.make_directory(project_path, DIRECTORY_MODE)
        except FileSystemError as exc:
            LOGGER.error("unable to create %s: %s", project_path, exc.code)
            raise DirectoryCreateFailedError(project_path, exc.code) from exc

        outcome = await self.copy_template_files(project_path)
        if outcome.error_count:
            LOGGER.info(
                "created %s with %d of %d template file(s) missing",
                project_path,
                outcome.error_count,
                outcome.attempted,
            )
        else:
            LOGGER.info("created %s with %d template file(s)", project_path, outcome.attempted)

        return ScaffoldResult(
            project_dir=to_canonical_form(project_path, style=self.style),
            outcome=outcome,
        )

    async def open_entry_file(self, project_dir: str) -> str | None:
        """Signal ``open_file`` when the project contains a regular entry file.

        Returns the canonical entry path, or ``None`` when it is absent.
        """

        entry = join(self._platform(project_dir), self.entry_file, style=self.style)
        try:
            entry_stat = await self.filesystem.stat(entry)
        except FileSystemError:
            return None
        if not entry_stat.is_file:
            return None

        canonical = to_canonical_form(entry, style=self.style)
        LOGGER.debug("opening entry file %s", canonical)
        if self.open_file is not None:
            self.open_file(canonical)
        return canonical
