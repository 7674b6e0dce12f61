import sys

from file_manager.cli import main

if __name__ == "__main__":
    sys.exit(main())
