"""Allow running as `python -m header2py`"""

import sys

from header2py.cli.main import main

sys.exit(main())
