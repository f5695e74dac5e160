"""Shared constants for gti."""

TOOL_NAME = "gti"

# Metadata directory git maintains per repository
GIT_DIR_NAME = ".git"

# Tool-private directory created inside the .git directory
SIDECAR_DIR_NAME = f"x-{TOOL_NAME}-info"

# Installation probe
GIT_EXECUTABLE = "git"
GIT_VERSION_ARG = "--version"
