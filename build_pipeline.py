"""
Minimal host build pipeline that plugins tap into.

A Compiler owns the hooks and options; each run creates a Compilation whose
asset mapping is filled during the emit phase and then written to disk.
"""

import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Tuple, Union

from schemas import CompilerOptions
from concat_utils.event_bus import ASSETS_WRITTEN, EMIT_FAILED, EMIT_START, EventBus

logger = logging.getLogger(__name__)


class AsyncSeriesHook:
    """Runs tapped coroutine functions one after another."""

    def __init__(self, name: str):
        self.name = name
        self.taps: List[Tuple[str, Callable[..., Awaitable[Any]]]] = []

    def tap_promise(self, plugin_name: str, fn: Callable[..., Awaitable[Any]]):
        """Register an async callback under a plugin name."""
        self.taps.append((plugin_name, fn))

    async def promise(self, *args):
        """Call every tap in registration order; the first failure stops the series."""
        for plugin_name, fn in self.taps:
            logger.debug(f"Hook '{self.name}' -> {plugin_name}")
            await fn(*args)


class CompilerHooks:
    """Lifecycle hooks exposed by the compiler."""

    def __init__(self):
        self.compilation = AsyncSeriesHook("compilation")
        self.emit = AsyncSeriesHook("emit")
        self.done = AsyncSeriesHook("done")


class RawSource:
    """Immutable asset content; ``source()`` hands back what it was built from."""

    __slots__ = ("_content",)

    def __init__(self, content: Union[bytes, str]):
        self._content = content

    def source(self) -> Union[bytes, str]:
        return self._content

    def buffer(self) -> bytes:
        if isinstance(self._content, str):
            return self._content.encode("utf-8")
        return bytes(self._content)

    def size(self) -> int:
        return len(self.buffer())

    def __eq__(self, other):
        return isinstance(other, RawSource) and other.buffer() == self.buffer()

    def __repr__(self):
        return f"RawSource({self.size()} bytes)"


class Compilation:
    """State of a single build: the assets about to be written and its events."""

    def __init__(self, compiler: "Compiler"):
        self.compiler = compiler
        self.assets: Dict[str, RawSource] = {}
        self.errors: List[BaseException] = []
        self.event_bus = EventBus()


class Compiler:
    """Drives a build: emit phase, then the asset write stage."""

    def __init__(self, options: CompilerOptions):
        self.options = options
        self.hooks = CompilerHooks()

    def apply(self, *plugins):
        """Let each plugin tap into the compiler hooks."""
        for plugin in plugins:
            plugin.apply(self)

    async def run(self) -> Compilation:
        """
        Run one build cycle.

        Returns:
            The finished compilation. If the emit phase fails nothing is
            written and the error is re-raised.
        """
        compilation = Compilation(self)
        await self.hooks.compilation.promise(compilation)
        compilation.event_bus.emit(EMIT_START, "compiler", {"taps": [name for name, _ in self.hooks.emit.taps]})

        try:
            await self.hooks.emit.promise(compilation)
        except Exception as e:
            compilation.errors.append(e)
            compilation.event_bus.emit(EMIT_FAILED, "compiler", {"error": str(e)})
            logger.error(f"Emit phase failed: {e}")
            raise

        written = write_assets(compilation)
        compilation.event_bus.emit(
            ASSETS_WRITTEN,
            "compiler",
            {"assets": sorted(compilation.assets), "output_path": self.options.output.path},
        )
        logger.info(f"Wrote {len(written)} assets to {self.options.output.path}")

        await self.hooks.done.promise(compilation)
        return compilation


def write_assets(compilation: Compilation) -> List[Path]:
    """Write every registered asset below the compiler's output path."""
    output_dir = Path(compilation.compiler.options.output.path)
    written = []
    for target, asset in compilation.assets.items():
        destination = output_dir / target
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(asset.buffer())
        logger.debug(f"  wrote {destination} ({asset.size()} bytes)")
        written.append(destination)
    return written
