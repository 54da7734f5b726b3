"""Starter .stylishdiff.toml template."""

DEFAULT_TOML = """\
# stylishdiff configuration
version = "1.0"

[output]
variant = "full"          # full | diff-only
color = "auto"            # auto | always | never

[styles]
# Any rich style definition, e.g. "bold magenta" or "#ff8800"
underline = "underline"
error = "red"
warning = "yellow"
muted = "dim"
changed = "green"
bold = "bold"
"""
