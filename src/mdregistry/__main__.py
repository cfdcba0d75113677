import sys

from mdregistry.cli._dispatcher import main

sys.exit(main())
