"""
ConcatTextPlugin: concatenate text files matched by a glob into one asset.
"""

import functools
import logging
import os
import re
from pathlib import PurePath
from typing import Any, Dict, Union

from schemas import CompilerOptions, ConcatOptions, ResolvedConcatOptions
from build_pipeline import RawSource
from concat_utils import concat_files, glob_text_files

logger = logging.getLogger(__name__)

PLUGIN_NAME = "ConcatTextPlugin"

BRACE_PATTERN = re.compile(r"\{.*\}+")


def default_name(files: str, output_filename: str) -> str:
    """Output filename stem plus the extension of the glob, unless it is a brace set."""
    stem = os.path.splitext(os.path.basename(output_filename))[0]
    extension = os.path.splitext(files)[1]
    if BRACE_PATTERN.search(extension):
        extension = ""
    return stem + extension


def resolve_target(output_path: str, name: str, output_dir: str) -> str:
    """Asset key for the artifact, relative to the build output directory."""
    if os.path.isabs(output_path):
        target = os.path.relpath(os.path.join(output_path, name), output_dir)
    else:
        target = os.path.normpath(os.path.join(output_path, name))
    return PurePath(target).as_posix()


def resolve_options(options: ConcatOptions, compiler_options: CompilerOptions) -> ResolvedConcatOptions:
    """
    Fill in defaults and resolve every path against the build configuration.

    Args:
        options: Options as the user wrote them
        compiler_options: Context directory and output settings of the build

    Returns:
        Frozen options used by every later emit
    """
    output = compiler_options.output
    output_path = options.output_path if options.output_path is not None else output.path
    name = options.name if options.name is not None else default_name(options.files, output.filename)

    files = options.files
    if not os.path.isabs(files):
        files = os.path.join(compiler_options.context, files)

    return ResolvedConcatOptions(
        files=files,
        output_path=output_path,
        name=name,
        target=resolve_target(output_path, name, output.path),
        sort=options.sort,
        separator=options.separator,
    )


async def emit_text(resolved: ResolvedConcatOptions, compilation):
    """
    Glob, concatenate and register the result as an asset.

    Nothing is registered unless both the glob and every read succeed.
    """
    files = await glob_text_files(resolved.files)
    if resolved.sort:
        files = sorted(files)
    if not files:
        logger.warning(f"{PLUGIN_NAME}: no files matched '{resolved.files}', emitting empty '{resolved.target}'")

    content = await concat_files(files, resolved.separator)

    compilation.assets[resolved.target] = RawSource(content)
    logger.info(f"{PLUGIN_NAME}: {len(files)} files -> {resolved.target} ({len(content)} bytes)")


class ConcatTextPlugin:
    """
    Concatenates the text files matched by ``files`` into a single asset.

    The asset lands at ``target``, computed once per compiler in ``apply``
    from ``output_path`` and ``name``.
    """

    def __init__(self, options: Union[ConcatOptions, Dict[str, Any]]):
        if not isinstance(options, ConcatOptions):
            options = ConcatOptions.model_validate(options)
        self.options = options

    def apply(self, compiler) -> ResolvedConcatOptions:
        """Resolve options for this compiler and tap its emit hook."""
        resolved = resolve_options(self.options, compiler.options)
        logger.debug(f"{PLUGIN_NAME}: '{resolved.files}' -> '{resolved.target}'")
        compiler.hooks.emit.tap_promise(PLUGIN_NAME, functools.partial(emit_text, resolved))
        return resolved
