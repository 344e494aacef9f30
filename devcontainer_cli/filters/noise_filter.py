from devcontainer_cli.utils.cli.constants import (
    ARCH_TAG_PREFIX,
    ARCH_TAG_SUFFIXES,
    DEPRECATION_HINT_PREFIX,
    NODE_WARNING_PREFIX,
)
from devcontainer_cli.utils.logging_config import get_logger

logger = get_logger(__name__)


class NoiseFilter:
    """Strips Node.js runtime chatter from devcontainer CLI output."""

    @staticmethod
    def is_noise(line: str) -> bool:
        """Whether a single carriage-return-free line is a known noise line."""
        if line.startswith(NODE_WARNING_PREFIX):
            return True
        if line.startswith(DEPRECATION_HINT_PREFIX):
            return True
        if line.startswith(ARCH_TAG_PREFIX) and line.endswith(ARCH_TAG_SUFFIXES):
            return True
        return False

    @staticmethod
    def filter_cli_output(output: str) -> str:
        """Drop noise lines and join what is left.

        Surviving lines are concatenated without separators, so a JSON
        document interrupted by warnings comes back as one contiguous string.
        """
        kept = []
        dropped = 0
        for line in output.split("\n"):
            line = line.replace("\r", "")
            if NoiseFilter.is_noise(line):
                dropped += 1
                continue
            kept.append(line)

        if dropped:
            logger.debug("noise_lines_dropped", count=dropped)
        return "".join(kept)


def remove_node_noise(output: str) -> str:
    return NoiseFilter.filter_cli_output(output)
