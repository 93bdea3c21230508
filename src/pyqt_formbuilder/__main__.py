import sys

from pyqt_formbuilder.app import main

sys.exit(main())
