import sys

from vertical_label_placement.cli import main

sys.exit(main())
