import sys

from magtexture.main import main

sys.exit(main())
