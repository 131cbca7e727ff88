import sys

from yaml_keypath.cli import main

sys.exit(main())
