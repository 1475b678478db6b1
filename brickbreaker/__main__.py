import sys

from brickbreaker.app import main

sys.exit(main())
