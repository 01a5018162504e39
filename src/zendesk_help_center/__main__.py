import sys

from zendesk_help_center.main import main

sys.exit(main())
