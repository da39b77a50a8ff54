import sys

from srtconvert.main import main

sys.exit(main())
