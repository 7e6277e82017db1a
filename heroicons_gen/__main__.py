import sys

from heroicons_gen.cli import main

sys.exit(main())
