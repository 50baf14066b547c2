import sys

from pg_installer.cli import main

sys.exit(main())
