import sys

from pyknap.misc import main

if __name__ == "__main__":
    sys.exit(main())
