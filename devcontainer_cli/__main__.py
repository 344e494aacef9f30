import sys

from devcontainer_cli.cli import main

sys.exit(main())
