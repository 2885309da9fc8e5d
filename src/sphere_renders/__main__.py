import sys

from sphere_renders.main import main

sys.exit(main())
