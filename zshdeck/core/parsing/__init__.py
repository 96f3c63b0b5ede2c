"""
Round-trip parsers and serializers for zsh configuration text.

Line-oriented heuristics only, no shell grammar.  Nothing in this package
touches the filesystem or raises on malformed input: text that does not
match a recognized shape is simply not a record.
"""

from zshdeck.core.parsing.aliases import parse_alias_line, parse_aliases, render_alias
from zshdeck.core.parsing.functions import (
    FunctionBlock,
    parse_functions,
    render_function,
    render_functions,
    scan_blocks,
)
from zshdeck.core.parsing.plugins import (
    PluginSpan,
    find_plugin_span,
    parse_plugins,
    render_plugin_list,
    splice_plugins,
)
from zshdeck.core.parsing.lines import split_lines
from zshdeck.core.parsing.quoting import unquote

__all__ = [
    "FunctionBlock",
    "PluginSpan",
    "find_plugin_span",
    "parse_alias_line",
    "parse_aliases",
    "parse_functions",
    "parse_plugins",
    "render_alias",
    "render_function",
    "render_functions",
    "render_plugin_list",
    "scan_blocks",
    "splice_plugins",
    "split_lines",
    "unquote",
]
