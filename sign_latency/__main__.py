"""Command-line entry point for the signing latency tester."""
import asyncio
import sys
from typing import Optional

from sign_latency.const import DEFAULT_ENV_FILE
from sign_latency.shared.config_manager import ConfigurationError, load_config
from sign_latency.shared.logging import LoggingManager
from sign_latency.benchmark.runner import BenchmarkRunner


logger = LoggingManager.get_logger(__name__)


def main(env_file: Optional[str] = DEFAULT_ENV_FILE) -> int:
    """Run the latency test and return the process exit code."""
    try:
        config = load_config(env_file=env_file)
    except ConfigurationError as e:
        print(e.format_help(), file=sys.stderr)
        return 1

    LoggingManager.setup_logging(config.log_level, config.library_log_levels)

    try:
        runner = BenchmarkRunner(config)
        asyncio.run(runner.run())
    except Exception as e:
        logger.debug("Latency run failed", exc_info=True)
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
