"""Allow running as ``python -m oas_codegen``."""

import sys

from .cli import main

sys.exit(main())
