from typing import Tuple

# Subcommand that prints the resolved devcontainer.json as JSON
READ_CONFIGURATION_SUBCOMMAND = "read-configuration"

# Node.js runtime banners printed by the CLI ahead of its JSON payload
NODE_WARNING_PREFIX = "(node:"
DEPRECATION_HINT_PREFIX = "(Use `Code --trace-deprecation ..."

# Architecture-tag banners look like "[...]x64." / "[...]x86."
ARCH_TAG_PREFIX = "["
ARCH_TAG_SUFFIXES: Tuple[str, ...] = ("x64.", "x86.")

ERROR_MESSAGES = {
    "invalid_path": "Invalid path: {}",
    "io_error": "IO error: {}",
    "utf8_error": "UTF8 error: {}",
}
