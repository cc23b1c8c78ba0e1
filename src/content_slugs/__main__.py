import sys

from content_slugs.cli import main

if __name__ == "__main__":
    sys.exit(main())
