"""Plugin registry for the build pipeline."""

from typing import Any, Dict

from .concat_text import PLUGIN_NAME, ConcatTextPlugin, emit_text, resolve_options

# Config key -> plugin class
PLUGINS = {
    "concat_text": ConcatTextPlugin,
}


def is_known_plugin(plugin_name: str) -> bool:
    """Check if a plugin name can be used in config.yaml."""
    return plugin_name in PLUGINS


def create_plugin(plugin_name: str, options: Dict[str, Any]):
    """Instantiate a registered plugin with its options."""
    return PLUGINS[plugin_name](options)


__all__ = ["PLUGINS", "PLUGIN_NAME", "ConcatTextPlugin", "emit_text", "resolve_options", "is_known_plugin", "create_plugin"]
