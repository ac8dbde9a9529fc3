import sys

from camxes_postproc.cli import main

sys.exit(main())
