import sys

from clima.cli import main

sys.exit(main())
