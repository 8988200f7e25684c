from brightlight.cli import main

raise SystemExit(main())
