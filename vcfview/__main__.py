import sys

from vcfview.launch import main

sys.exit(main())
