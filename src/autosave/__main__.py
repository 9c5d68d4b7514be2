import sys

from autosave.workflow import main

sys.exit(main())
