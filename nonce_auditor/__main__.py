import sys

from nonce_auditor.main import main

sys.exit(main())
