import sys

from binvis.convert import main

if __name__ == "__main__":
    sys.exit(main())
