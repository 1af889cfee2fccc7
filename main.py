import sys

from hotseat.app import main

if __name__ == '__main__':
    sys.exit(main())
