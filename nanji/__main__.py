import sys

from nanji.app.main import main

sys.exit(main())
