import sys

from hotel_topology.cli import main

sys.exit(main())
