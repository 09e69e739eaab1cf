"""Starter .gitdiffloc.toml template."""

DEFAULT_TOML = """\
# git-diff-loc configuration
version = "1.0"

[output]
format = "terminal"       # terminal | json
show_header = true

[git]
timeout = 60              # seconds allowed for `git diff`
ignore_whitespace = false # pass --ignore-all-space to git diff
"""
