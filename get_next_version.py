# filename: get_next_version.py

import sys

from release_bumper.cli import main

# Reads the repository, bump type and token from the environment,
# prints/appends version=<next> and creates the release when a token is set.
sys.exit(main())
