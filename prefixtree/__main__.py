import sys

from prefixtree.cli import main

if __name__ == "__main__":
    sys.exit(main())
