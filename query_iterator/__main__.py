import sys

from query_iterator.main import main

sys.exit(main())
