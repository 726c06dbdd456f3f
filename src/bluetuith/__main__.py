from bluetuith.cli import main

raise SystemExit(main())
