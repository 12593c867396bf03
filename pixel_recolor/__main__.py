import sys

from .cli.recolor import main

sys.exit(main())
