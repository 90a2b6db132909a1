import sys

from montytally_cli import main

if __name__ == "__main__":
    sys.exit(main())
