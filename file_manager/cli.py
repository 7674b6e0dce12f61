import logging
import sys

from file_manager.container import DependencyContainer
from file_manager.exceptions import ConfigurationError
from file_manager.settings import load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(argv: list[str] | None = None) -> int:
    """Start an interactive file manager session.

    Usage: ``file-manager [--username <name>]``
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = load_settings(argv)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    # Logs go to stderr; stdout carries the session itself
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    container = DependencyContainer(settings)
    return container.get_shell().run()


if __name__ == "__main__":
    sys.exit(main())
