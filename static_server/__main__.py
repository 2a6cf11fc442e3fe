import sys

from static_server.main import main

sys.exit(main())
