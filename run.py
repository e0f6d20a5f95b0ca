"""
Main entry point for concat-text builds.
"""

import argparse
import asyncio
import logging
import sys

from build_pipeline import Compiler
from config_utils import ConfigError, build_plugins, load_config

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Concatenate text files into build assets.")
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML build configuration")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Run a single build from a config file."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    try:
        config = load_config(args.config)
        logger.info(f"✅ Configuration loaded from {args.config}")

        compiler = Compiler(config.compiler_options())
        compiler.apply(*build_plugins(config))

        compilation = await compiler.run()
    except ConfigError as e:
        logger.error(f"❌ Configuration error: {e}")
        return 1
    except Exception as e:
        logger.error(f"❌ Build failed: {e}")
        return 1

    for target, asset in sorted(compilation.assets.items()):
        logger.info(f"  📄 {target} ({asset.size()} bytes)")
    logger.debug(f"Build events: {compilation.event_bus.counts()}")
    logger.info(f"🎉 Build finished: {len(compilation.assets)} assets")
    return 0


def cli():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
