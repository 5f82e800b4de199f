import sys

from release_tag.tag import main

sys.exit(main())
