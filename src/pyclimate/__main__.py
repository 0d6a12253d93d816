from pyclimate.cli import main

raise SystemExit(main())
