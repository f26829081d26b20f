"""Allow running as `python -m kubeusage`."""

import sys

from kubeusage.cli import main

if __name__ == "__main__":
    sys.exit(main())
