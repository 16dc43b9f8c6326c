"""The render context handed to backends, and a backend that runs a command."""

from __future__ import annotations

import json
import logging
import os
import shlex
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import IO, Any

from bookpress.tomlpath import read

log = logging.getLogger(__name__)

VERSION = "0.1.0"


class RenderError(Exception):
    """Raised when a backend cannot render the book."""


@dataclass
class RenderContext:
    """Everything a backend needs to know to render a book."""

    root: Path
    book: Any
    config: dict[str, Any]
    destination: Path
    version: str = VERSION
    chapter_titles: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        self.destination = Path(self.destination)

    def source_dir(self) -> Path:
        """Return the book's source directory."""
        src = read(self.config, "book.src")
        return self.root / (src if isinstance(src, str) else "src")

    def to_json(self) -> str:
        """Serialise the context; chapter titles are not included."""
        return json.dumps(
            {
                "version": self.version,
                "root": os.fspath(self.root),
                "book": self.book,
                "config": self.config,
                "destination": os.fspath(self.destination),
            }
        )


def load_render_context(reader: IO[str] | IO[bytes]) -> RenderContext:
    """Load a ``RenderContext`` from its JSON representation."""
    try:
        data = json.load(reader)
        return RenderContext(
            root=Path(data["root"]),
            book=data["book"],
            config=data["config"],
            destination=Path(data["destination"]),
            version=data["version"],
        )
    except (ValueError, KeyError, TypeError) as exc:
        raise RenderError("Unable to deserialize the `RenderContext`") from exc


class Renderer(ABC):
    """A backend that turns a book into some output."""

    name: str

    @abstractmethod
    def render(self, ctx: RenderContext) -> None:
        """Render the book described by ``ctx``."""


def _words(cmd: str) -> Iterator[str]:
    lexer = shlex.shlex(cmd, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        yield from lexer
    except ValueError:
        # A malformed tail ends the word list, like an unterminated quote.
        return


def _is_single_component(exe: str) -> bool:
    if exe == ".":
        return True
    parts = PurePath(exe).parts
    return len(parts) == 1 and not exe.startswith(("./", ".\\"))


@dataclass(frozen=True)
class CmdRenderer(Renderer):
    """A backend that runs a command and sends it the context as JSON on stdin."""

    name: str
    cmd: str

    def compose_command(
        self, root: str | os.PathLike[str], destination: str | os.PathLike[str]
    ) -> list[str]:
        """Return the argument list that starts this backend."""
        words = list(_words(self.cmd))
        if not words:
            raise RenderError("Command string was empty")
        exe, *args = words

        if _is_single_component(exe):
            program = exe
        else:
            abs_exe = Path(root) / exe
            legacy_path = Path(destination) / exe
            if abs_exe.exists():
                program = str(abs_exe)
            elif legacy_path.exists():
                log.warning(
                    "Renderer command `%s` uses a path relative to the renderer "
                    "output directory `%s`. This was previously accepted, but has "
                    "been deprecated. Relative executable paths should be relative "
                    "to the book root.",
                    exe,
                    destination,
                )
                program = str(legacy_path)
            else:
                program = str(abs_exe)

        return [program, *args]

    def _handle_start_error(self, ctx: RenderContext, error: OSError) -> None:
        if isinstance(error, FileNotFoundError):
            if read(ctx.config, f"output.{self.name}.optional") is True:
                log.warning(
                    "The command `%s` for backend `%s` was not found, "
                    "but was marked as optional.",
                    self.cmd,
                    self.name,
                )
                return
            log.error(
                'The command `%s` wasn\'t found, is the "%s" backend installed? '
                'If you want to ignore this error when the "%s" backend is not '
                "installed, set `optional = true` in the `[output.%s]` section "
                "of the book.toml configuration file.",
                self.cmd,
                self.name,
                self.name,
                self.name,
            )
        raise RenderError("Unable to start the backend") from error

    def render(self, ctx: RenderContext) -> None:
        """Run the command in the destination directory and wait for it."""
        log.info('Invoking the "%s" renderer', self.name)

        try:
            ctx.destination.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass

        argv = self.compose_command(ctx.root, ctx.destination)
        try:
            child = subprocess.Popen(argv, stdin=subprocess.PIPE, cwd=ctx.destination)
        except OSError as exc:
            self._handle_start_error(ctx, exc)
            return

        assert child.stdin is not None
        try:
            child.stdin.write(ctx.to_json().encode("utf-8"))
        except OSError as exc:
            log.warning("Error writing the RenderContext to the backend, %s", exc)
        finally:
            try:
                child.stdin.close()
            except OSError:
                pass

        try:
            status = child.wait()
        except OSError as exc:
            raise RenderError("Error waiting for the backend to complete") from exc

        log.debug("%s exited with output: %s", self.cmd, status)

        if status != 0:
            log.error("Renderer exited with non-zero return code.")
            raise RenderError(f'The "{self.name}" renderer failed')