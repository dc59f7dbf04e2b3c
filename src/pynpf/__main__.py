import sys

from pynpf.cli import main

sys.exit(main())
